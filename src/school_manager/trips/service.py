from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.timestamps import Timestamp
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_PAYMENT_METHOD, UNKNOWN_GRADE
from ..core.enums import PaymentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..payments.model import Payment, new_transaction_reference
from ..payments.repository import PaymentRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import Trip
from .repository import TripRepository

logger = logging.getLogger(__name__)


class TripService:
    def __init__(self, trips: TripRepository, payments: PaymentRepository, students: StudentRepository):
        self._trips = trips
        self._payments = payments
        self._students = students

    def _require(self, trip_id: str) -> Trip:
        trip = self._trips.get_by_id(trip_id)
        if trip is None:
            raise NotFoundError(f"Trip not found with ID: {trip_id}")
        return trip

    def create(self, trip: Trip) -> Trip:
        require_non_empty(trip.title, "Title")
        if trip.registered_students is None:
            trip.registered_students = []
        if trip.created_at is None:
            trip.created_at = Timestamp.now()
        self._trips.create(trip)
        logger.info("Trip created successfully with ID: %s", trip.trip_id)
        return trip

    def list_all(self) -> Sequence[Trip]:
        return self._trips.list_all()

    def get(self, trip_id: str) -> Optional[Trip]:
        return self._trips.get_by_id(trip_id)

    def update(self, trip_id: str, trip: Trip) -> Trip:
        existing = self._require(trip_id)

        trip.trip_id = trip_id
        if trip.created_at is None:
            trip.created_at = existing.created_at
        if trip.registered_students is None:
            trip.registered_students = list(existing.registered_students or [])

        self._trips.save(trip_id, trip)
        logger.info("Trip updated successfully: %s", trip_id)
        return trip

    def delete(self, trip_id: str) -> None:
        self._require(trip_id)
        self._trips.delete(trip_id)
        logger.info("Trip deleted successfully: %s", trip_id)

    def register_student(
        self,
        trip_id: str,
        *,
        student_id: Optional[str],
        parent_id: Optional[str],
        payment_method: Optional[str] = None,
    ) -> Payment:
        """Add a student to the trip and record a completed mock payment for it."""

        student_id = require_non_empty(student_id, "studentId")
        parent_id = require_non_empty(parent_id, "parentId")

        trip = self._require(trip_id)
        registered = list(trip.registered_students or [])
        if student_id in registered:
            raise ValidationError("Student already registered for this trip")

        registered.append(student_id)
        trip.registered_students = registered
        self._trips.save(trip_id, trip)

        now = Timestamp.now()
        payment = Payment(
            student_id=student_id,
            trip_id=trip_id,
            parent_id=parent_id,
            amount=trip.price,
            status=PaymentStatus.COMPLETED,
            payment_method=payment_method or DEFAULT_PAYMENT_METHOD,
            transaction_reference=new_transaction_reference(),
            created_at=now,
            paid_at=now,
        )
        self._payments.create(payment)
        logger.info("Student %s registered for trip %s with mock payment", student_id, trip_id)
        return payment

    def unregister_student(self, trip_id: str, student_id: str) -> Trip:
        trip = self._require(trip_id)
        trip.registered_students = [s for s in (trip.registered_students or []) if s != student_id]
        self._trips.save(trip_id, trip)
        logger.info("Student %s unregistered from trip %s", student_id, trip_id)
        return trip

    def _set_active(self, trip_id: str, active: bool) -> Trip:
        trip = self._require(trip_id)
        trip.active = active
        self._trips.save(trip_id, trip)
        logger.info("Trip %s %s", trip_id, "activated" if active else "put on hold")
        return trip

    def hold(self, trip_id: str) -> Trip:
        return self._set_active(trip_id, False)

    def activate(self, trip_id: str) -> Trip:
        return self._set_active(trip_id, True)

    def update_image(self, trip_id: str, image_data: Optional[str]) -> Trip:
        image_data = require_non_empty(image_data, "imageData")
        trip = self._require(trip_id)
        trip.image_url = image_data
        self._trips.save(trip_id, trip)
        logger.info("Trip %s image updated", trip_id)
        return trip

    def paid_students_by_grade(self, trip_id: str) -> dict[str, list[Student]]:
        trip = self._require(trip_id)
        registered = set(trip.registered_students or [])
        if not registered:
            return {}

        by_grade: dict[str, list[Student]] = {}
        for student in self._students.list_all():
            if student.student_id in registered:
                by_grade.setdefault(student.grade or UNKNOWN_GRADE, []).append(student)

        logger.info(
            "Retrieved %d paid students for trip %s, grouped by %d grades",
            sum(len(group) for group in by_grade.values()),
            trip_id,
            len(by_grade),
        )
        return by_grade
