from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import StudentStatus
from .model import Student


class StudentRepository(Protocol):
    def create(self, student: Student) -> str:
        """Persist a new student; the generated id is also set on ``student``."""

        raise NotImplementedError

    def save(self, student_id: str, student: Student) -> None:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_parent(self, parent_id: str) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_status(self, status: StudentStatus) -> Sequence[Student]:
        raise NotImplementedError

    def find_by_birth_certificate(self, birth_certificate_id: str) -> Sequence[Student]:
        raise NotImplementedError

    def delete(self, student_id: str) -> None:
        raise NotImplementedError
