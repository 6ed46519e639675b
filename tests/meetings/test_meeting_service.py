from __future__ import annotations

import pytest

from school_manager.common.timestamps import Timestamp
from school_manager.core.enums import MeetingStatus, MeetingType
from school_manager.core.exceptions import NotFoundError, ValidationError
from school_manager.meetings.model import Meeting


def test_admin_created_meeting_defaults_to_scheduled(container):
    meeting = container.meeting_service.create(Meeting(title="PTA", type=MeetingType.GROUP_MEETING))

    assert meeting.status is MeetingStatus.SCHEDULED
    assert meeting.created_at is not None


def test_explicit_status_is_kept(container):
    meeting = container.meeting_service.create(Meeting(title="PTA", status=MeetingStatus.COMPLETED))

    assert container.meeting_service.get(meeting.meeting_id).status is MeetingStatus.COMPLETED


def test_request_one_on_one_is_pending(container):
    when = Timestamp(1760183400)

    meeting = container.meeting_service.request_one_on_one(
        parent_id="p1",
        teacher_id="t1",
        title="Progress",
        description=None,
        scheduled_time=when,
        teacher_name="Mr Dube",
    )

    stored = container.meeting_service.get(meeting.meeting_id)
    assert stored.type is MeetingType.ONE_ON_ONE
    assert stored.status is MeetingStatus.PENDING
    assert stored.scheduled_time == when
    assert stored.parent_id == "p1"


def test_request_one_on_one_requires_a_parent(container):
    with pytest.raises(ValidationError, match="parentId"):
        container.meeting_service.request_one_on_one(
            parent_id=None, teacher_id="t1", title="x", description=None, scheduled_time=None
        )


def test_parent_sees_group_meetings_and_own_one_on_ones(container):
    service = container.meeting_service
    group = service.create(Meeting(title="PTA", type=MeetingType.GROUP_MEETING))
    mine = service.create(Meeting(title="Mine", type=MeetingType.ONE_ON_ONE, parent_id="p1"))
    service.create(Meeting(title="Theirs", type=MeetingType.ONE_ON_ONE, parent_id="p2"))

    visible = {m.meeting_id for m in service.list_for_parent("p1")}

    assert visible == {group.meeting_id, mine.meeting_id}


def test_approve_and_reject(container):
    service = container.meeting_service
    a = service.request_one_on_one(parent_id="p1", teacher_id=None, title="a", description=None, scheduled_time=None)
    b = service.request_one_on_one(parent_id="p1", teacher_id=None, title="b", description=None, scheduled_time=None)

    with pytest.raises(ValidationError):
        service.reject(b.meeting_id, " ")
    service.reject(b.meeting_id, "Teacher unavailable")
    service.approve(a.meeting_id)

    assert [m.meeting_id for m in service.list_approved()] == [a.meeting_id]
    assert [m.rejection_reason for m in service.list_rejected()] == ["Teacher unavailable"]
    assert service.list_pending() == []
    assert service.approve(b.meeting_id).rejection_reason is None


def test_update_keeps_created_at(container):
    created = container.meeting_service.create(Meeting(title="PTA"))

    updated = container.meeting_service.update(created.meeting_id, Meeting(title="AGM", status=MeetingStatus.CANCELLED))

    assert updated.created_at == created.created_at
    assert container.meeting_service.get(created.meeting_id).status is MeetingStatus.CANCELLED


def test_missing_meeting(container):
    with pytest.raises(NotFoundError):
        container.meeting_service.approve("nope")
    with pytest.raises(NotFoundError):
        container.meeting_service.delete("nope")
