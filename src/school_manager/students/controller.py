from __future__ import annotations

from flask import Flask

from ..common.responses import fail, json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX
from .model import Student


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    def _student_from_body() -> Student:
        return Student.from_json(json_body(), timestamps=container.body_timestamps)

    @app.route(f"{API_PREFIX}/students", methods=["GET"], endpoint="list_students")
    def list_students():
        return ok(service.list_all())

    @app.route(f"{API_PREFIX}/students", methods=["POST"], endpoint="create_student")
    def create_student():
        student = service.add_student(_student_from_body())
        return ok(student, "Student created successfully", status=201)

    @app.route(f"{API_PREFIX}/students/pending", methods=["GET"], endpoint="pending_students")
    def pending_students():
        return ok(service.list_pending())

    @app.route(f"{API_PREFIX}/students/approved", methods=["GET"], endpoint="approved_students")
    def approved_students():
        return ok(service.list_approved())

    @app.route(f"{API_PREFIX}/students/rejected", methods=["GET"], endpoint="rejected_students")
    def rejected_students():
        return ok(service.list_rejected())

    @app.route(f"{API_PREFIX}/students/parent/<parent_id>", methods=["GET"], endpoint="students_by_parent")
    def students_by_parent(parent_id: str):
        return ok(service.list_by_parent(parent_id))

    @app.route(f"{API_PREFIX}/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        student = service.get(student_id)
        if student is None:
            return fail("Student not found", 404)
        return ok(student)

    @app.route(f"{API_PREFIX}/students/<student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: str):
        student = service.update_student(student_id, _student_from_body())
        return ok(student, "Student updated successfully")

    @app.route(f"{API_PREFIX}/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        service.delete(student_id)
        return ok(None, "Student deleted successfully")

    @app.route(f"{API_PREFIX}/students/<student_id>/approve", methods=["PUT"], endpoint="approve_student")
    def approve_student(student_id: str):
        return ok(service.approve(student_id), "Student approved successfully")

    @app.route(
        f"{API_PREFIX}/students/<student_id>/approve-with-class",
        methods=["PUT"],
        endpoint="approve_student_with_class",
    )
    def approve_student_with_class(student_id: str):
        body = json_body()
        student = service.approve_with_class(
            student_id,
            class_name=body.get("className"),
            teacher=body.get("teacher"),
        )
        return ok(student, "Student approved and assigned to class successfully")

    @app.route(f"{API_PREFIX}/students/<student_id>/reject", methods=["PUT"], endpoint="reject_student")
    def reject_student(student_id: str):
        body = json_body()
        return ok(service.reject(student_id, body.get("reason")), "Student rejected successfully")
