from __future__ import annotations

from flask import Flask

from ..common.responses import fail, json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX
from .model import Meeting


def register(app: Flask, container: Container) -> None:
    service = container.meeting_service

    def _meeting_from_body() -> Meeting:
        return Meeting.from_json(json_body(), timestamps=container.body_timestamps)

    @app.route(f"{API_PREFIX}/meetings", methods=["GET"], endpoint="list_meetings")
    def list_meetings():
        return ok(service.list_all())

    @app.route(f"{API_PREFIX}/meetings", methods=["POST"], endpoint="create_meeting")
    def create_meeting():
        return ok(service.create(_meeting_from_body()), "Meeting scheduled successfully")

    @app.route(f"{API_PREFIX}/meetings/parent/<parent_id>", methods=["GET"], endpoint="meetings_for_parent")
    def meetings_for_parent(parent_id: str):
        return ok(service.list_for_parent(parent_id))

    @app.route(f"{API_PREFIX}/meetings/request-one-on-one", methods=["POST"], endpoint="request_one_on_one")
    def request_one_on_one():
        body = json_body()
        meeting = service.request_one_on_one(
            parent_id=body.get("parentId"),
            teacher_id=body.get("teacherId"),
            title=body.get("title"),
            description=body.get("description"),
            # Browser datetime-local value, read in the school's zone.
            scheduled_time=container.request_timestamps.coerce(body.get("scheduledTime")),
            teacher_name=body.get("teacherName"),
            parent_name=body.get("parentName"),
        )
        return ok(meeting, "One-on-one meeting request submitted for approval")

    @app.route(f"{API_PREFIX}/meetings/pending", methods=["GET"], endpoint="pending_meetings")
    def pending_meetings():
        return ok(service.list_pending())

    @app.route(f"{API_PREFIX}/meetings/approved", methods=["GET"], endpoint="approved_meetings")
    def approved_meetings():
        return ok(service.list_approved())

    @app.route(f"{API_PREFIX}/meetings/rejected", methods=["GET"], endpoint="rejected_meetings")
    def rejected_meetings():
        return ok(service.list_rejected())

    @app.route(f"{API_PREFIX}/meetings/<meeting_id>", methods=["GET"], endpoint="get_meeting")
    def get_meeting(meeting_id: str):
        meeting = service.get(meeting_id)
        if meeting is None:
            return fail("Meeting not found", 404)
        return ok(meeting)

    @app.route(f"{API_PREFIX}/meetings/<meeting_id>", methods=["PUT"], endpoint="update_meeting")
    def update_meeting(meeting_id: str):
        return ok(service.update(meeting_id, _meeting_from_body()), "Meeting updated successfully")

    @app.route(f"{API_PREFIX}/meetings/<meeting_id>", methods=["DELETE"], endpoint="delete_meeting")
    def delete_meeting(meeting_id: str):
        service.delete(meeting_id)
        return ok(None, "Meeting deleted successfully")

    @app.route(f"{API_PREFIX}/meetings/<meeting_id>/approve", methods=["PUT"], endpoint="approve_meeting")
    def approve_meeting(meeting_id: str):
        return ok(service.approve(meeting_id), "Meeting approved successfully")

    @app.route(f"{API_PREFIX}/meetings/<meeting_id>/reject", methods=["PUT"], endpoint="reject_meeting")
    def reject_meeting(meeting_id: str):
        body = json_body()
        return ok(service.reject(meeting_id, body.get("reason")), "Meeting rejected successfully")
