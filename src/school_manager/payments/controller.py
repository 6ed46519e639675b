from __future__ import annotations

from typing import Optional

from flask import Flask

from ..common.responses import fail, json_body, ok
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.enums import PaymentStatus
from ..core.exceptions import ValidationError
from .model import Payment


def _parse_status(value: Optional[str]) -> PaymentStatus:
    try:
        return PaymentStatus(value)
    except ValueError:
        raise ValidationError("Invalid payment status")


def register(app: Flask, container: Container) -> None:
    service = container.payment_service

    def _payment_from_body() -> Payment:
        return Payment.from_json(json_body(), timestamps=container.body_timestamps)

    @app.route(f"{API_PREFIX}/payments/mock", methods=["POST"], endpoint="create_mock_payment")
    def create_mock_payment():
        payment = service.create_mock_payment(_payment_from_body())
        return ok(payment, "Payment processed successfully", status=201)

    @app.route(f"{API_PREFIX}/payments", methods=["GET"], endpoint="list_payments")
    def list_payments():
        return ok(service.list_all())

    @app.route(f"{API_PREFIX}/payments/<payment_id>", methods=["GET"], endpoint="get_payment")
    def get_payment(payment_id: str):
        payment = service.get(payment_id)
        if payment is None:
            return fail("Payment not found", 404)
        return ok(payment)

    @app.route(f"{API_PREFIX}/payments/student/<student_id>", methods=["GET"], endpoint="payments_by_student")
    def payments_by_student(student_id: str):
        return ok(service.list_by_student(student_id))

    @app.route(f"{API_PREFIX}/payments/parent/<parent_id>", methods=["GET"], endpoint="payments_by_parent")
    def payments_by_parent(parent_id: str):
        return ok(service.list_by_parent(parent_id))

    @app.route(f"{API_PREFIX}/payments/trip/<trip_id>", methods=["GET"], endpoint="payments_by_trip")
    def payments_by_trip(trip_id: str):
        return ok(service.list_by_trip(trip_id))

    @app.route(f"{API_PREFIX}/payments/status/<status>", methods=["GET"], endpoint="payments_by_status")
    def payments_by_status(status: str):
        return ok(service.list_by_status(_parse_status(status)))

    @app.route(f"{API_PREFIX}/payments/check/<student_id>/<trip_id>", methods=["GET"], endpoint="check_payment")
    def check_payment(student_id: str, trip_id: str):
        return ok({"hasPaid": service.has_student_paid_for_trip(student_id, trip_id)})

    @app.route(f"{API_PREFIX}/payments/<payment_id>/status", methods=["PUT"], endpoint="update_payment_status")
    def update_payment_status(payment_id: str):
        body = json_body()
        raw = body.get("status")
        if not raw or not str(raw).strip():
            raise ValidationError("status field is required")
        payment = service.update_status(payment_id, _parse_status(raw))
        return ok(payment, "Payment status updated successfully")

    @app.route(f"{API_PREFIX}/payments/<payment_id>", methods=["PUT"], endpoint="update_payment")
    def update_payment(payment_id: str):
        return ok(service.update(payment_id, _payment_from_body()), "Payment updated successfully")

    @app.route(f"{API_PREFIX}/payments/<payment_id>", methods=["DELETE"], endpoint="delete_payment")
    def delete_payment(payment_id: str):
        service.delete(payment_id)
        return ok(None, "Payment deleted successfully")
