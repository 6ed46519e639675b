from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp
from ..core.enums import AnnouncementType, DocumentType, RequestStatus


@dataclass
class Announcement(Record):
    announcement_id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    type: AnnouncementType = AnnouncementType.GENERAL
    active: bool = True
    created_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.announcement_id = identifier


@dataclass
class DocumentRequest(Record):
    """A parent asking the school office to issue a document for a child."""

    request_id: Optional[str] = None
    parent_id: Optional[str] = None
    student_id: Optional[str] = None
    document_type: Optional[DocumentType] = None
    reason: Optional[str] = None
    status: RequestStatus = RequestStatus.PENDING
    created_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.request_id = identifier
