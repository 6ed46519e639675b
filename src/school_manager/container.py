from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from zoneinfo import ZoneInfo

from .admin.firestore_admin_repository import FirestoreAnnouncementRepository, FirestoreDocumentRequestRepository
from .admin.service import AdminService
from .auth.firestore_user_repository import FirestoreUserRepository
from .auth.identity import FirebaseIdentityProvider, IdentityProvider
from .auth.service import AuthService
from .common.timestamps import TimestampNormalizer
from .core.constants import (
    DEFAULT_BODY_TIMEZONE,
    DEFAULT_HEALTH_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_TIMEZONE,
    DEFAULT_STORE_MAX_WORKERS,
    DEFAULT_STORE_TIMEOUT_SECONDS,
)
from .database.connection import FirebaseConfig, FirebaseConnection
from .database.firestore_store import FirestoreStore
from .documents.firestore_document_repository import FirestoreDocumentRepository
from .documents.service import DocumentService
from .meetings.firestore_meeting_repository import FirestoreMeetingRepository
from .meetings.service import MeetingService
from .parents.firestore_parent_repository import FirestoreParentRepository
from .parents.service import ParentService
from .payments.firestore_payment_repository import FirestorePaymentRepository
from .payments.service import PaymentService
from .students.firestore_student_repository import FirestoreStudentRepository
from .students.service import StudentService
from .trips.firestore_trip_repository import FirestoreTripRepository
from .trips.service import TripService


@dataclass(frozen=True)
class Container:
    store: FirestoreStore
    identity: IdentityProvider

    # Zone for bare date-times sent as request fields (datetime-local pickers).
    request_timestamps: TimestampNormalizer
    # Zone for bare date-times inside entity bodies.
    body_timestamps: TimestampNormalizer

    students_repo: FirestoreStudentRepository
    parents_repo: FirestoreParentRepository
    trips_repo: FirestoreTripRepository
    payments_repo: FirestorePaymentRepository
    meetings_repo: FirestoreMeetingRepository
    documents_repo: FirestoreDocumentRepository
    announcements_repo: FirestoreAnnouncementRepository
    document_requests_repo: FirestoreDocumentRequestRepository
    users_repo: FirestoreUserRepository

    student_service: StudentService
    parent_service: ParentService
    trip_service: TripService
    payment_service: PaymentService
    meeting_service: MeetingService
    document_service: DocumentService
    admin_service: AdminService
    auth_service: AuthService

    conn: Optional[FirebaseConnection] = field(default=None, compare=False)


def assemble(
    store: FirestoreStore,
    identity: IdentityProvider,
    *,
    request_timezone: str = DEFAULT_REQUEST_TIMEZONE,
    body_timezone: str = DEFAULT_BODY_TIMEZONE,
    conn: Optional[FirebaseConnection] = None,
) -> Container:
    """Wire repositories and services on top of an existing store."""

    students_repo = FirestoreStudentRepository(store)
    parents_repo = FirestoreParentRepository(store)
    trips_repo = FirestoreTripRepository(store)
    payments_repo = FirestorePaymentRepository(store)
    meetings_repo = FirestoreMeetingRepository(store)
    documents_repo = FirestoreDocumentRepository(store)
    announcements_repo = FirestoreAnnouncementRepository(store)
    document_requests_repo = FirestoreDocumentRequestRepository(store)
    users_repo = FirestoreUserRepository(store)

    return Container(
        store=store,
        identity=identity,
        request_timestamps=TimestampNormalizer(ZoneInfo(request_timezone)),
        body_timestamps=TimestampNormalizer(ZoneInfo(body_timezone)),
        students_repo=students_repo,
        parents_repo=parents_repo,
        trips_repo=trips_repo,
        payments_repo=payments_repo,
        meetings_repo=meetings_repo,
        documents_repo=documents_repo,
        announcements_repo=announcements_repo,
        document_requests_repo=document_requests_repo,
        users_repo=users_repo,
        student_service=StudentService(students_repo),
        parent_service=ParentService(parents_repo),
        trip_service=TripService(trips_repo, payments_repo, students_repo),
        payment_service=PaymentService(payments_repo),
        meeting_service=MeetingService(meetings_repo),
        document_service=DocumentService(documents_repo),
        admin_service=AdminService(announcements_repo, document_requests_repo),
        auth_service=AuthService(users_repo, parents_repo, identity),
        conn=conn,
    )


def build_container(
    *,
    firebase_config: dict,
    store_timeout: float = DEFAULT_STORE_TIMEOUT_SECONDS,
    health_timeout: float = DEFAULT_HEALTH_TIMEOUT_SECONDS,
    max_workers: int = DEFAULT_STORE_MAX_WORKERS,
    request_timezone: str = DEFAULT_REQUEST_TIMEZONE,
    body_timezone: str = DEFAULT_BODY_TIMEZONE,
) -> Container:
    config = FirebaseConfig(
        credentials_path=firebase_config.get("credentials_path"),
        project_id=firebase_config.get("project_id"),
        api_key=firebase_config.get("api_key"),
    )
    conn = FirebaseConnection.get_instance(config)

    store = FirestoreStore(
        conn.firestore(),
        timeout=store_timeout,
        health_timeout=health_timeout,
        max_workers=max_workers,
    )
    identity = FirebaseIdentityProvider(conn.app, api_key=config.api_key, timeout=store_timeout)

    return assemble(
        store,
        identity,
        request_timezone=request_timezone,
        body_timezone=body_timezone,
        conn=conn,
    )
