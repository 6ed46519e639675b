from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.timestamps import Timestamp
from ..common.validators import require_non_empty
from ..core.enums import MeetingStatus, MeetingType
from ..core.exceptions import NotFoundError
from .model import Meeting
from .repository import MeetingRepository

logger = logging.getLogger(__name__)


class MeetingService:
    def __init__(self, meetings: MeetingRepository):
        self._meetings = meetings

    def _require(self, meeting_id: str) -> Meeting:
        meeting = self._meetings.get_by_id(meeting_id)
        if meeting is None:
            raise NotFoundError(f"Meeting not found with ID: {meeting_id}")
        return meeting

    def list_all(self) -> Sequence[Meeting]:
        return self._meetings.list_all()

    def create(self, meeting: Meeting) -> Meeting:
        # Admin-created meetings skip approval; parent requests arrive already PENDING.
        if meeting.status is None:
            meeting.status = MeetingStatus.SCHEDULED
        if meeting.created_at is None:
            meeting.created_at = Timestamp.now()
        self._meetings.create(meeting)
        logger.info("Meeting %s created with status %s", meeting.meeting_id, meeting.status.value)
        return meeting

    def list_for_parent(self, parent_id: str) -> list[Meeting]:
        """Every group meeting plus the one-on-ones this parent requested."""

        return [
            m
            for m in self._meetings.list_all()
            if m.type == MeetingType.GROUP_MEETING
            or (m.type == MeetingType.ONE_ON_ONE and m.parent_id == parent_id)
        ]

    def request_one_on_one(
        self,
        *,
        parent_id: Optional[str],
        teacher_id: Optional[str],
        title: Optional[str],
        description: Optional[str],
        scheduled_time: Optional[Timestamp],
        teacher_name: Optional[str] = None,
        parent_name: Optional[str] = None,
    ) -> Meeting:
        meeting = Meeting(
            title=title,
            description=description,
            scheduled_time=scheduled_time,
            teacher_id=teacher_id,
            teacher_name=teacher_name,
            parent_id=require_non_empty(parent_id, "parentId"),
            parent_name=parent_name,
            type=MeetingType.ONE_ON_ONE,
            status=MeetingStatus.PENDING,
            created_at=Timestamp.now(),
        )
        return self.create(meeting)

    def get(self, meeting_id: str) -> Optional[Meeting]:
        return self._meetings.get_by_id(meeting_id)

    def update(self, meeting_id: str, meeting: Meeting) -> Meeting:
        existing = self._require(meeting_id)
        meeting.meeting_id = meeting_id
        if meeting.created_at is None:
            meeting.created_at = existing.created_at
        self._meetings.save(meeting_id, meeting)
        return meeting

    def delete(self, meeting_id: str) -> None:
        self._require(meeting_id)
        self._meetings.delete(meeting_id)
        logger.info("Meeting %s deleted", meeting_id)

    def list_pending(self) -> Sequence[Meeting]:
        return self._meetings.list_by_status(MeetingStatus.PENDING)

    def list_approved(self) -> Sequence[Meeting]:
        return self._meetings.list_by_status(MeetingStatus.APPROVED)

    def list_rejected(self) -> Sequence[Meeting]:
        return self._meetings.list_by_status(MeetingStatus.REJECTED)

    def approve(self, meeting_id: str) -> Meeting:
        meeting = self._require(meeting_id)
        meeting.status = MeetingStatus.APPROVED
        meeting.rejection_reason = None
        self._meetings.save(meeting_id, meeting)
        logger.info("Meeting %s approved", meeting_id)
        return meeting

    def reject(self, meeting_id: str, reason: Optional[str]) -> Meeting:
        reason = require_non_empty(reason, "Rejection reason")
        meeting = self._require(meeting_id)
        meeting.status = MeetingStatus.REJECTED
        meeting.rejection_reason = reason
        self._meetings.save(meeting_id, meeting)
        logger.info("Meeting %s rejected", meeting_id)
        return meeting
