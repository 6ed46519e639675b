from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL.fullmatch(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def optional_email(value: Optional[str], field_name: str = "Email") -> Optional[str]:
    if value is None or not value.strip():
        return value
    return require_email(value, field_name)
