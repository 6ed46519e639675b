from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp
from ..core.enums import Gender, StudentStatus


@dataclass
class Grade(Record):
    subject: Optional[str] = None
    score: Optional[str] = None
    term: Optional[str] = None
    date: Optional[Timestamp] = None
    comments: Optional[str] = None


@dataclass
class Student(Record):
    student_id: Optional[str] = None
    name: Optional[str] = None
    surname: Optional[str] = None
    gender: Optional[Gender] = None
    date_of_birth: Optional[Timestamp] = None
    # Unique per student; used to reject duplicate applications.
    birth_certificate_id: Optional[str] = None
    nationality: Optional[str] = None
    grade: Optional[str] = None
    year_of_admission: Optional[int] = None
    previous_school: Optional[str] = None
    latest_school_report: Optional[str] = None
    parent_id: Optional[str] = None
    class_name: Optional[str] = None
    teacher: Optional[str] = None
    status: StudentStatus = StudentStatus.PENDING
    rejection_reason: Optional[str] = None
    grades: list[Grade] = field(default_factory=list)
    created_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.student_id = identifier
