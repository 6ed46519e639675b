from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp
from ..core.enums import PaymentStatus


def new_transaction_reference() -> str:
    """Mock gateway reference, e.g. ``TXN-3F9A0C1B``."""

    return "TXN-" + uuid.uuid4().hex[:8].upper()


@dataclass
class Payment(Record):
    payment_id: Optional[str] = None
    student_id: Optional[str] = None
    trip_id: Optional[str] = None
    parent_id: Optional[str] = None
    amount: Optional[Decimal] = None
    status: PaymentStatus = PaymentStatus.PENDING
    payment_method: Optional[str] = None
    transaction_reference: Optional[str] = None
    payment_note: Optional[str] = None
    created_at: Optional[Timestamp] = None
    paid_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.payment_id = identifier
