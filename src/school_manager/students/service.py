from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.timestamps import Timestamp
from ..common.validators import require_non_empty
from ..core.enums import StudentStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

DUPLICATE_BIRTH_CERTIFICATE = "A student with this birth certificate ID already exists"


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def _require(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if student is None:
            raise NotFoundError(f"Student not found with ID: {student_id}")
        return student

    def _ensure_unique_birth_certificate(self, birth_certificate_id: str) -> None:
        # Query-then-write: two concurrent registrations can both pass this check.
        if self._students.find_by_birth_certificate(birth_certificate_id):
            raise ValidationError(DUPLICATE_BIRTH_CERTIFICATE)

    def add_student(self, student: Student) -> Student:
        require_non_empty(student.name, "Name")
        require_non_empty(student.surname, "Surname")
        student.birth_certificate_id = require_non_empty(student.birth_certificate_id, "Birth certificate ID")

        self._ensure_unique_birth_certificate(student.birth_certificate_id)

        student.status = StudentStatus.PENDING
        student.created_at = Timestamp.now()
        self._students.create(student)
        logger.info("Student %s created for parent %s", student.student_id, student.parent_id)
        return student

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()

    def get(self, student_id: str) -> Optional[Student]:
        return self._students.get_by_id(student_id)

    def list_by_parent(self, parent_id: str) -> Sequence[Student]:
        return self._students.list_by_parent(parent_id)

    def list_pending(self) -> Sequence[Student]:
        return self._students.list_by_status(StudentStatus.PENDING)

    def list_approved(self) -> Sequence[Student]:
        return self._students.list_by_status(StudentStatus.APPROVED)

    def list_rejected(self) -> Sequence[Student]:
        return self._students.list_by_status(StudentStatus.REJECTED)

    def update_student(self, student_id: str, updated: Student) -> Student:
        existing = self._require(student_id)

        if updated.birth_certificate_id != existing.birth_certificate_id:
            require_non_empty(updated.birth_certificate_id, "Birth certificate ID")
            self._ensure_unique_birth_certificate(updated.birth_certificate_id)

        updated.student_id = student_id
        updated.created_at = existing.created_at
        self._students.save(student_id, updated)
        logger.info("Student %s updated", student_id)
        return updated

    def approve(self, student_id: str) -> Student:
        student = self._require(student_id)
        student.status = StudentStatus.APPROVED
        student.rejection_reason = None
        self._students.save(student_id, student)
        logger.info("Student %s approved", student_id)
        return student

    def approve_with_class(self, student_id: str, *, class_name: Optional[str], teacher: Optional[str]) -> Student:
        class_name = require_non_empty(class_name, "Class name")
        teacher = require_non_empty(teacher, "Teacher name")

        student = self._require(student_id)
        student.status = StudentStatus.APPROVED
        student.rejection_reason = None
        student.class_name = class_name
        student.teacher = teacher
        self._students.save(student_id, student)
        logger.info("Student %s approved into class %s", student_id, class_name)
        return student

    def reject(self, student_id: str, reason: Optional[str]) -> Student:
        reason = require_non_empty(reason, "Rejection reason")

        student = self._require(student_id)
        student.status = StudentStatus.REJECTED
        student.rejection_reason = reason
        self._students.save(student_id, student)
        logger.info("Student %s rejected", student_id)
        return student

    def delete(self, student_id: str) -> None:
        self._require(student_id)
        self._students.delete(student_id)
        logger.info("Student %s deleted", student_id)
