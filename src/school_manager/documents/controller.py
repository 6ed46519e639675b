from __future__ import annotations

from flask import Flask

from ..common.responses import fail, json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.enums import DocumentType
from ..core.exceptions import ValidationError
from .model import Document


def register(app: Flask, container: Container) -> None:
    service = container.document_service

    def _document_from_body() -> Document:
        return Document.from_json(json_body(), timestamps=container.body_timestamps)

    @app.route(f"{API_PREFIX}/documents", methods=["POST"], endpoint="upload_document")
    def upload_document():
        return ok(service.upload(_document_from_body()), "Document uploaded successfully", status=201)

    @app.route(f"{API_PREFIX}/documents", methods=["GET"], endpoint="list_documents")
    def list_documents():
        return ok(service.list_all())

    @app.route(f"{API_PREFIX}/documents/unverified", methods=["GET"], endpoint="unverified_documents")
    def unverified_documents():
        return ok(service.list_unverified())

    @app.route(f"{API_PREFIX}/documents/student/<student_id>", methods=["GET"], endpoint="documents_by_student")
    def documents_by_student(student_id: str):
        return ok(service.list_by_student(student_id))

    @app.route(f"{API_PREFIX}/documents/parent/<parent_id>", methods=["GET"], endpoint="documents_by_parent")
    def documents_by_parent(parent_id: str):
        return ok(service.list_by_parent(parent_id))

    @app.route(f"{API_PREFIX}/documents/type/<document_type>", methods=["GET"], endpoint="documents_by_type")
    def documents_by_type(document_type: str):
        try:
            parsed = DocumentType(document_type)
        except ValueError:
            raise ValidationError(f"Invalid document type: {document_type}")
        return ok(service.list_by_type(parsed))

    @app.route(f"{API_PREFIX}/documents/<document_id>", methods=["GET"], endpoint="get_document")
    def get_document(document_id: str):
        document = service.get(document_id)
        if document is None:
            return fail("Document not found", 404)
        return ok(document)

    @app.route(f"{API_PREFIX}/documents/<document_id>/verify", methods=["PUT"], endpoint="verify_document")
    def verify_document(document_id: str):
        body = json_body()
        return ok(service.verify(document_id, body.get("verifiedBy")), "Document verified successfully")

    @app.route(f"{API_PREFIX}/documents/<document_id>", methods=["PUT"], endpoint="update_document")
    def update_document(document_id: str):
        return ok(service.update(document_id, _document_from_body()), "Document updated successfully")

    @app.route(f"{API_PREFIX}/documents/<document_id>", methods=["DELETE"], endpoint="delete_document")
    def delete_document(document_id: str):
        service.delete(document_id)
        return ok(None, "Document deleted successfully")
