from __future__ import annotations

from typing import Sequence

from ..core.enums import MeetingStatus
from ..database.firestore_repository import FirestoreRepository
from .model import Meeting


class FirestoreMeetingRepository(FirestoreRepository[Meeting]):
    collection = "meetings"
    model = Meeting

    def list_by_status(self, status: MeetingStatus) -> Sequence[Meeting]:
        return self.list_by("status", status)
