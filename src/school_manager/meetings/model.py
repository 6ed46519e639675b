from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp
from ..core.enums import MeetingStatus, MeetingType


@dataclass
class Meeting(Record):
    meeting_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    scheduled_time: Optional[Timestamp] = None
    teacher_id: Optional[str] = None
    teacher_name: Optional[str] = None
    parent_id: Optional[str] = None
    parent_name: Optional[str] = None
    type: Optional[MeetingType] = None
    # Left unset so the service can tell "not provided" apart from a chosen status.
    status: Optional[MeetingStatus] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.meeting_id = identifier
