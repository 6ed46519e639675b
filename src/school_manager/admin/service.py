from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.timestamps import Timestamp
from ..common.validators import require_non_empty
from ..core.enums import RequestStatus
from ..core.exceptions import NotFoundError
from .model import Announcement, DocumentRequest
from .repository import AnnouncementRepository, DocumentRequestRepository

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, announcements: AnnouncementRepository, document_requests: DocumentRequestRepository):
        self._announcements = announcements
        self._document_requests = document_requests

    # Announcements
    def list_announcements(self) -> Sequence[Announcement]:
        return self._announcements.list_all()

    def create_announcement(self, announcement: Announcement) -> Announcement:
        require_non_empty(announcement.title, "Title")
        if announcement.created_at is None:
            announcement.created_at = Timestamp.now()
        self._announcements.create(announcement)
        logger.info("Announcement %s created", announcement.announcement_id)
        return announcement

    def get_announcement(self, announcement_id: str) -> Optional[Announcement]:
        return self._announcements.get_by_id(announcement_id)

    def update_announcement(self, announcement_id: str, announcement: Announcement) -> Announcement:
        existing = self._announcements.get_by_id(announcement_id)
        if existing is None:
            raise NotFoundError(f"Announcement not found with ID: {announcement_id}")

        announcement.announcement_id = announcement_id
        if announcement.created_at is None:
            announcement.created_at = existing.created_at
        self._announcements.save(announcement_id, announcement)
        return announcement

    def delete_announcement(self, announcement_id: str) -> None:
        if self._announcements.get_by_id(announcement_id) is None:
            raise NotFoundError(f"Announcement not found with ID: {announcement_id}")
        self._announcements.delete(announcement_id)

    # Document requests
    def list_document_requests(self) -> Sequence[DocumentRequest]:
        return self._document_requests.list_all()

    def list_pending_document_requests(self) -> Sequence[DocumentRequest]:
        return self._document_requests.list_by_status(RequestStatus.PENDING)

    def submit_document_request(self, parent_id: str, request: DocumentRequest) -> DocumentRequest:
        request.parent_id = parent_id
        request.status = RequestStatus.PENDING
        if request.created_at is None:
            request.created_at = Timestamp.now()
        self._document_requests.create(request)
        logger.info("Document request %s submitted by parent %s", request.request_id, parent_id)
        return request

    def approve_document_request(self, request_id: str) -> Optional[DocumentRequest]:
        """Mark a request APPROVED; returns None when it does not exist."""

        request = self._document_requests.get_by_id(request_id)
        if request is None:
            return None
        request.status = RequestStatus.APPROVED
        self._document_requests.save(request_id, request)
        logger.info("Document request %s approved", request_id)
        return request
