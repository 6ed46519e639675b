from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp


@dataclass
class Parent(Record):
    parent_id: Optional[str] = None
    # Firebase Authentication uid of the account that owns this profile.
    uid: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    children_ids: list[str] = field(default_factory=list)
    created_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.parent_id = identifier
