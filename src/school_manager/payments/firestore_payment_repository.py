from __future__ import annotations

from typing import Sequence

from ..core.enums import PaymentStatus
from ..database.firestore_repository import FirestoreRepository
from .model import Payment


class FirestorePaymentRepository(FirestoreRepository[Payment]):
    collection = "payments"
    model = Payment

    def list_by_student(self, student_id: str) -> Sequence[Payment]:
        return self.list_by("studentId", student_id)

    def list_by_parent(self, parent_id: str) -> Sequence[Payment]:
        return self.list_by("parentId", parent_id)

    def list_by_trip(self, trip_id: str) -> Sequence[Payment]:
        return self.list_by("tripId", trip_id)

    def list_by_status(self, status: PaymentStatus) -> Sequence[Payment]:
        return self.list_by("status", status)
