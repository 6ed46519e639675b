from __future__ import annotations

from flask import Flask

from ..common.responses import fail, json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX
from .model import Trip


def register(app: Flask, container: Container) -> None:
    service = container.trip_service

    def _trip_from_body() -> Trip:
        return Trip.from_json(json_body(), timestamps=container.body_timestamps)

    @app.route(f"{API_PREFIX}/trips", methods=["POST"], endpoint="create_trip")
    def create_trip():
        return ok(service.create(_trip_from_body()), "Trip created successfully", status=201)

    @app.route(f"{API_PREFIX}/trips", methods=["GET"], endpoint="list_trips")
    def list_trips():
        return ok(service.list_all())

    @app.route(f"{API_PREFIX}/trips/<trip_id>", methods=["GET"], endpoint="get_trip")
    def get_trip(trip_id: str):
        trip = service.get(trip_id)
        if trip is None:
            return fail("Trip not found", 404)
        return ok(trip)

    @app.route(f"{API_PREFIX}/trips/<trip_id>", methods=["PUT"], endpoint="update_trip")
    def update_trip(trip_id: str):
        return ok(service.update(trip_id, _trip_from_body()), "Trip updated successfully")

    @app.route(f"{API_PREFIX}/trips/<trip_id>", methods=["DELETE"], endpoint="delete_trip")
    def delete_trip(trip_id: str):
        service.delete(trip_id)
        return ok(None, "Trip deleted successfully")

    @app.route(f"{API_PREFIX}/trips/<trip_id>/register", methods=["POST"], endpoint="register_for_trip")
    def register_for_trip(trip_id: str):
        body = json_body()
        payment = service.register_student(
            trip_id,
            student_id=body.get("studentId"),
            parent_id=body.get("parentId"),
            payment_method=body.get("paymentMethod"),
        )
        return ok(payment, "Student registered and payment processed successfully")

    @app.route(
        f"{API_PREFIX}/trips/<trip_id>/register/<student_id>",
        methods=["DELETE"],
        endpoint="unregister_from_trip",
    )
    def unregister_from_trip(trip_id: str, student_id: str):
        service.unregister_student(trip_id, student_id)
        return ok(None, "Student unregistered successfully from trip")

    @app.route(f"{API_PREFIX}/trips/<trip_id>/hold", methods=["PUT"], endpoint="hold_trip")
    def hold_trip(trip_id: str):
        return ok(service.hold(trip_id), "Trip put on hold successfully")

    @app.route(f"{API_PREFIX}/trips/<trip_id>/activate", methods=["PUT"], endpoint="activate_trip")
    def activate_trip(trip_id: str):
        return ok(service.activate(trip_id), "Trip activated successfully")

    @app.route(f"{API_PREFIX}/trips/<trip_id>/image", methods=["PUT"], endpoint="update_trip_image")
    def update_trip_image(trip_id: str):
        body = json_body()
        return ok(service.update_image(trip_id, body.get("imageData")), "Trip image updated successfully")

    @app.route(f"{API_PREFIX}/trips/<trip_id>/paid-students", methods=["GET"], endpoint="paid_students")
    def paid_students(trip_id: str):
        return ok(service.paid_students_by_grade(trip_id))
