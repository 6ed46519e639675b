from __future__ import annotations

from typing import Sequence

from ..core.enums import RequestStatus
from ..database.firestore_repository import FirestoreRepository
from .model import Announcement, DocumentRequest


class FirestoreAnnouncementRepository(FirestoreRepository[Announcement]):
    collection = "announcements"
    model = Announcement


class FirestoreDocumentRequestRepository(FirestoreRepository[DocumentRequest]):
    collection = "documentRequests"
    model = DocumentRequest

    def list_by_status(self, status: RequestStatus) -> Sequence[DocumentRequest]:
        return self.list_by("status", status)
