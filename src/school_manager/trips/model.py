from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp


@dataclass
class Trip(Record):
    trip_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    destination: Optional[str] = None
    # URL or base64 data URI.
    image_url: Optional[str] = None
    price: Optional[Decimal] = None
    trip_date: Optional[Timestamp] = None
    eligible_grades: list[str] = field(default_factory=list)
    # None on an incoming update means "keep the stored list".
    registered_students: Optional[list[str]] = None
    active: bool = True
    created_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.trip_id = identifier
