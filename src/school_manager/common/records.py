"""Conversion between dataclass entities and Firestore / JSON documents.

Entities use snake_case attributes; documents and API bodies use camelCase
keys (the shape the web client and the existing Firestore data already have).
"""

from __future__ import annotations

import types
import typing
from dataclasses import fields
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol, TypeVar, runtime_checkable

from ..core.exceptions import ValidationError
from .timestamps import Timestamp, TimestampNormalizer, format_timestamp

R = TypeVar("R", bound="Record")

_UTC_NORMALIZER = TimestampNormalizer()


@runtime_checkable
class Identifiable(Protocol):
    """Entity that accepts the identifier generated for it on create."""

    def assign_id(self, identifier: str) -> None:
        raise NotImplementedError


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _encode(value: Any, *, timestamp: Callable[[Timestamp], Any]) -> Any:
    if isinstance(value, Timestamp):
        return timestamp(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, Record):
        return value._encode_fields(timestamp)
    if isinstance(value, (list, tuple)):
        return [_encode(item, timestamp=timestamp) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item, timestamp=timestamp) for key, item in value.items()}
    return value


def _unwrap_optional(hint: Any) -> Any:
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _decode(name: str, hint: Any, value: Any, *, timestamp: Callable[[Any], Optional[Timestamp]], json: bool) -> Any:
    if value is None:
        return None

    hint = _unwrap_optional(hint)
    if typing.get_origin(hint) is list:
        (item_hint,) = typing.get_args(hint) or (Any,)
        if not isinstance(value, (list, tuple)):
            raise ValidationError(f"{name} must be a list")
        return [_decode(name, item_hint, item, timestamp=timestamp, json=json) for item in value]

    if hint is Timestamp:
        return timestamp(value)

    if isinstance(hint, type) and issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid {name}: {value}") from exc

    if hint is Decimal:
        try:
            return Decimal(str(value))
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid {name}: {value}") from exc

    if isinstance(hint, type) and issubclass(hint, Record):
        if not isinstance(value, Mapping):
            raise ValidationError(f"{name} must be an object")
        return hint._decode_fields(value, timestamp=timestamp, json=json)

    if hint is int and isinstance(value, str) and json:
        try:
            return int(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid {name}: {value}") from exc

    return value


def _timestamp_from_store(value: Any) -> Optional[Timestamp]:
    if isinstance(value, datetime):
        return Timestamp.from_datetime(value)
    # Documents written by older clients may hold strings or {seconds, nanos}.
    return _UTC_NORMALIZER.coerce(value)


class Record:
    """Mixin for dataclass entities stored as documents."""

    def _encode_fields(self, timestamp: Callable[[Timestamp], Any]) -> dict[str, Any]:
        return {camel_case(f.name): _encode(getattr(self, f.name), timestamp=timestamp) for f in fields(self)}

    def to_document(self) -> dict[str, Any]:
        return self._encode_fields(Timestamp.to_datetime)

    def to_json(self) -> dict[str, Any]:
        return self._encode_fields(format_timestamp)

    @classmethod
    def _decode_fields(cls: type[R], data: Mapping[str, Any], *, timestamp, json: bool) -> R:
        hints = typing.get_type_hints(cls)
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = camel_case(f.name)
            if key not in data:
                continue
            values[f.name] = _decode(key, hints[f.name], data[key], timestamp=timestamp, json=json)
        return cls(**values)

    @classmethod
    def from_document(cls: type[R], data: Mapping[str, Any]) -> R:
        return cls._decode_fields(data, timestamp=_timestamp_from_store, json=False)

    @classmethod
    def from_json(cls: type[R], data: Mapping[str, Any], *, timestamps: Optional[TimestampNormalizer] = None) -> R:
        if not isinstance(data, Mapping):
            raise ValidationError("Request body must be a JSON object")
        normalizer = timestamps or _UTC_NORMALIZER
        return cls._decode_fields(data, timestamp=normalizer.coerce, json=True)
