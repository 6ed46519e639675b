from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Role stored on the user document and used for routing after login."""

    PARENT = "PARENT"
    ADMIN = "ADMIN"
    TEACHER = "TEACHER"


class StudentStatus(str, Enum):
    """Admission workflow of a student application."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class MeetingType(str, Enum):
    ONE_ON_ONE = "ONE_ON_ONE"
    GROUP_MEETING = "GROUP_MEETING"


class MeetingStatus(str, Enum):
    """Meeting lifecycle.

    SCHEDULED is the legacy name for APPROVED, kept for existing documents.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class RequestStatus(str, Enum):
    """Approval flow of a parent's document request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class AnnouncementType(str, Enum):
    GENERAL = "GENERAL"
    ACADEMIC = "ACADEMIC"
    EVENT = "EVENT"
    URGENT = "URGENT"


class DocumentType(str, Enum):
    TIMETABLE = "TIMETABLE"
    TRANSFER_LETTER = "TRANSFER_LETTER"
    COMPLAINT = "COMPLAINT"
    STUDENT_REPORT = "STUDENT_REPORT"
    BIRTH_CERTIFICATE = "BIRTH_CERTIFICATE"
    IMMUNIZATION_RECORD = "IMMUNIZATION_RECORD"
    PREVIOUS_SCHOOL_REPORT = "PREVIOUS_SCHOOL_REPORT"
    ID_DOCUMENT = "ID_DOCUMENT"
    PROOF_OF_RESIDENCE = "PROOF_OF_RESIDENCE"
    MEDICAL_CERTIFICATE = "MEDICAL_CERTIFICATE"
    OTHER = "OTHER"
