from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import MeetingStatus
from .model import Meeting


class MeetingRepository(Protocol):
    def create(self, meeting: Meeting) -> str:
        raise NotImplementedError

    def save(self, meeting_id: str, meeting: Meeting) -> None:
        raise NotImplementedError

    def get_by_id(self, meeting_id: str) -> Optional[Meeting]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Meeting]:
        raise NotImplementedError

    def list_by_status(self, status: MeetingStatus) -> Sequence[Meeting]:
        raise NotImplementedError

    def delete(self, meeting_id: str) -> None:
        raise NotImplementedError
