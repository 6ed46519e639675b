from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PaymentStatus
from .model import Payment


class PaymentRepository(Protocol):
    def create(self, payment: Payment) -> str:
        raise NotImplementedError

    def save(self, payment_id: str, payment: Payment) -> None:
        raise NotImplementedError

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Payment]:
        raise NotImplementedError

    def list_by_student(self, student_id: str) -> Sequence[Payment]:
        raise NotImplementedError

    def list_by_parent(self, parent_id: str) -> Sequence[Payment]:
        raise NotImplementedError

    def list_by_trip(self, trip_id: str) -> Sequence[Payment]:
        raise NotImplementedError

    def list_by_status(self, status: PaymentStatus) -> Sequence[Payment]:
        raise NotImplementedError

    def delete(self, payment_id: str) -> None:
        raise NotImplementedError
