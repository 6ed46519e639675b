from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp
from ..core.enums import UserRole


@dataclass
class User(Record):
    """Profile stored at ``users/{uid}``; the password lives in Firebase Authentication."""

    uid: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[UserRole] = None
    created_at: Optional[Timestamp] = None
    active: bool = True


@dataclass
class Registration(Record):
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    role: UserRole = UserRole.PARENT


@dataclass
class UserProfile(Record):
    """What the client receives after register / login."""

    uid: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[UserRole] = None
    parent_id: Optional[str] = None
