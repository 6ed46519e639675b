from __future__ import annotations

from typing import Sequence

from ..core.enums import StudentStatus
from ..database.firestore_repository import FirestoreRepository
from .model import Student


class FirestoreStudentRepository(FirestoreRepository[Student]):
    collection = "students"
    model = Student

    def list_by_parent(self, parent_id: str) -> Sequence[Student]:
        return self.list_by("parentId", parent_id)

    def list_by_status(self, status: StudentStatus) -> Sequence[Student]:
        return self.list_by("status", status)

    def find_by_birth_certificate(self, birth_certificate_id: str) -> Sequence[Student]:
        return self.list_by("birthCertificateId", birth_certificate_id)
