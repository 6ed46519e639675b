from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.timestamps import Timestamp
from ..core.enums import PaymentStatus
from ..core.exceptions import NotFoundError
from .model import Payment, new_transaction_reference
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


class PaymentService:
    """Mock payments: nothing is charged, records are marked COMPLETED directly."""

    def __init__(self, payments: PaymentRepository):
        self._payments = payments

    def _require(self, payment_id: str) -> Payment:
        payment = self._payments.get_by_id(payment_id)
        if payment is None:
            raise NotFoundError(f"Payment not found with ID: {payment_id}")
        return payment

    def create_mock_payment(self, payment: Payment) -> Payment:
        if not payment.transaction_reference:
            payment.transaction_reference = new_transaction_reference()

        now = Timestamp.now()
        payment.status = PaymentStatus.COMPLETED
        payment.paid_at = now
        if payment.created_at is None:
            payment.created_at = now

        self._payments.create(payment)
        logger.info("Mock payment %s created (ref=%s)", payment.payment_id, payment.transaction_reference)
        return payment

    def list_all(self) -> Sequence[Payment]:
        return self._payments.list_all()

    def get(self, payment_id: str) -> Optional[Payment]:
        return self._payments.get_by_id(payment_id)

    def list_by_student(self, student_id: str) -> Sequence[Payment]:
        return self._payments.list_by_student(student_id)

    def list_by_parent(self, parent_id: str) -> Sequence[Payment]:
        return self._payments.list_by_parent(parent_id)

    def list_by_trip(self, trip_id: str) -> Sequence[Payment]:
        return self._payments.list_by_trip(trip_id)

    def list_by_status(self, status: PaymentStatus) -> Sequence[Payment]:
        return self._payments.list_by_status(status)

    def update_status(self, payment_id: str, status: PaymentStatus) -> Payment:
        payment = self._require(payment_id)
        payment.status = status
        if status == PaymentStatus.COMPLETED and payment.paid_at is None:
            payment.paid_at = Timestamp.now()
        self._payments.save(payment_id, payment)
        logger.info("Payment %s status set to %s", payment_id, status.value)
        return payment

    def update(self, payment_id: str, payment: Payment) -> Payment:
        existing = self._require(payment_id)
        payment.payment_id = payment_id
        if payment.created_at is None:
            payment.created_at = existing.created_at
        self._payments.save(payment_id, payment)
        return payment

    def delete(self, payment_id: str) -> None:
        self._require(payment_id)
        self._payments.delete(payment_id)
        logger.info("Payment %s deleted", payment_id)

    def has_student_paid_for_trip(self, student_id: str, trip_id: str) -> bool:
        return any(
            p.trip_id == trip_id and p.status == PaymentStatus.COMPLETED
            for p in self._payments.list_by_student(student_id)
        )
