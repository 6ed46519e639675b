from __future__ import annotations

from flask import Flask

from ..admin.model import DocumentRequest
from ..common.responses import fail, json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.exceptions import AuthorizationError
from ..students.model import Student
from .model import Parent


def register(app: Flask, container: Container) -> None:
    parents = container.parent_service
    students = container.student_service

    def _from_body(model):
        return model.from_json(json_body(), timestamps=container.body_timestamps)

    @app.route(f"{API_PREFIX}/parents", methods=["POST"], endpoint="create_parent")
    def create_parent():
        parent = parents.create(_from_body(Parent))
        return ok(parent, "Parent created successfully", status=201)

    @app.route(f"{API_PREFIX}/parents", methods=["GET"], endpoint="list_parents")
    def list_parents():
        return ok(parents.list_all())

    @app.route(f"{API_PREFIX}/parents/<parent_id>", methods=["GET"], endpoint="get_parent")
    def get_parent(parent_id: str):
        parent = parents.get(parent_id)
        if parent is None:
            return fail("Parent not found", 404)
        return ok(parent)

    @app.route(f"{API_PREFIX}/parents/<parent_id>", methods=["PUT"], endpoint="update_parent")
    def update_parent(parent_id: str):
        return ok(parents.update(parent_id, _from_body(Parent)), "Parent updated successfully")

    @app.route(f"{API_PREFIX}/parents/<parent_id>", methods=["DELETE"], endpoint="delete_parent")
    def delete_parent(parent_id: str):
        parents.delete(parent_id)
        return ok(None, "Parent deleted successfully")

    @app.route(f"{API_PREFIX}/parents/<parent_id>/children", methods=["POST"], endpoint="add_child")
    def add_child(parent_id: str):
        student: Student = _from_body(Student)
        student.parent_id = parent_id
        return ok(students.add_student(student), "Child added successfully")

    @app.route(f"{API_PREFIX}/parents/<parent_id>/children", methods=["GET"], endpoint="list_children")
    def list_children(parent_id: str):
        return ok(students.list_by_parent(parent_id))

    @app.route(
        f"{API_PREFIX}/parents/<parent_id>/children/<student_id>",
        methods=["PUT"],
        endpoint="update_child",
    )
    def update_child(parent_id: str, student_id: str):
        existing = students.get(student_id)
        if existing is None:
            return fail("Student not found", 404)
        if existing.parent_id != parent_id:
            raise AuthorizationError("You can only update your own children's data")

        student: Student = _from_body(Student)
        student.parent_id = parent_id
        return ok(students.update_student(student_id, student), "Child data updated successfully")

    @app.route(
        f"{API_PREFIX}/parents/<parent_id>/document-requests",
        methods=["POST"],
        endpoint="request_document",
    )
    def request_document(parent_id: str):
        document_request = container.admin_service.submit_document_request(parent_id, _from_body(DocumentRequest))
        return ok(document_request, "Document request submitted")
