from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import Announcement, DocumentRequest


class AnnouncementRepository(Protocol):
    def create(self, announcement: Announcement) -> str:
        raise NotImplementedError

    def save(self, announcement_id: str, announcement: Announcement) -> None:
        raise NotImplementedError

    def get_by_id(self, announcement_id: str) -> Optional[Announcement]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Announcement]:
        raise NotImplementedError

    def delete(self, announcement_id: str) -> None:
        raise NotImplementedError


class DocumentRequestRepository(Protocol):
    def create(self, request: DocumentRequest) -> str:
        raise NotImplementedError

    def save(self, request_id: str, request: DocumentRequest) -> None:
        raise NotImplementedError

    def get_by_id(self, request_id: str) -> Optional[DocumentRequest]:
        raise NotImplementedError

    def list_all(self) -> Sequence[DocumentRequest]:
        raise NotImplementedError

    def list_by_status(self, status: RequestStatus) -> Sequence[DocumentRequest]:
        raise NotImplementedError
