from __future__ import annotations

from flask import Flask

from ..common.responses import fail, json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX
from .model import Announcement


def register(app: Flask, container: Container) -> None:
    service = container.admin_service

    def _announcement_from_body() -> Announcement:
        return Announcement.from_json(json_body(), timestamps=container.body_timestamps)

    @app.route(f"{API_PREFIX}/admin/announcements", methods=["GET"], endpoint="list_announcements")
    def list_announcements():
        return ok(service.list_announcements())

    @app.route(f"{API_PREFIX}/admin/announcements", methods=["POST"], endpoint="create_announcement")
    def create_announcement():
        return ok(service.create_announcement(_announcement_from_body()), "Announcement created")

    @app.route(f"{API_PREFIX}/admin/announcements/<announcement_id>", methods=["GET"], endpoint="get_announcement")
    def get_announcement(announcement_id: str):
        announcement = service.get_announcement(announcement_id)
        if announcement is None:
            return fail("Announcement not found", 404)
        return ok(announcement)

    @app.route(
        f"{API_PREFIX}/admin/announcements/<announcement_id>",
        methods=["PUT"],
        endpoint="update_announcement",
    )
    def update_announcement(announcement_id: str):
        announcement = service.update_announcement(announcement_id, _announcement_from_body())
        return ok(announcement, "Announcement updated successfully")

    @app.route(
        f"{API_PREFIX}/admin/announcements/<announcement_id>",
        methods=["DELETE"],
        endpoint="delete_announcement",
    )
    def delete_announcement(announcement_id: str):
        service.delete_announcement(announcement_id)
        return ok(None, "Announcement deleted successfully")

    @app.route(f"{API_PREFIX}/admin/document-requests", methods=["GET"], endpoint="list_document_requests")
    def list_document_requests():
        return ok(service.list_document_requests())

    @app.route(
        f"{API_PREFIX}/admin/document-requests/pending",
        methods=["GET"],
        endpoint="pending_document_requests",
    )
    def pending_document_requests():
        return ok(service.list_pending_document_requests())

    @app.route(
        f"{API_PREFIX}/admin/document-requests/<request_id>/approve",
        methods=["PUT"],
        endpoint="approve_document_request",
    )
    def approve_document_request(request_id: str):
        document_request = service.approve_document_request(request_id)
        if document_request is None:
            return fail("Document request not found", 404)
        return ok(document_request, "Document request approved")
