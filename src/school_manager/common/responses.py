"""Uniform response envelope: ``{success, message, data, timestamp}``."""

from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    StoreError,
    StoreTimeout,
    ValidationError,
)
from .records import Record
from .timestamps import Timestamp, format_timestamp

logger = logging.getLogger(__name__)


def to_payload(data: Any) -> Any:
    if isinstance(data, Record):
        return data.to_json()
    if isinstance(data, Timestamp):
        return format_timestamp(data)
    if isinstance(data, (list, tuple)):
        return [to_payload(item) for item in data]
    if isinstance(data, dict):
        return {key: to_payload(value) for key, value in data.items()}
    return data


def envelope(*, success: bool, data: Any = None, message: Optional[str] = None) -> dict:
    return {
        "success": success,
        "message": message,
        "data": to_payload(data),
        "timestamp": format_timestamp(Timestamp.now()),
    }


def ok(data: Any = None, message: Optional[str] = None, status: int = 200):
    return jsonify(envelope(success=True, data=data, message=message)), status


def fail(message: str, status: int = 400):
    return jsonify(envelope(success=False, message=message)), status


def json_body() -> dict:
    """Request body as a dict; a missing or non-object body is a validation error."""

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), 404)

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return fail(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return fail(str(e), 403)

    @app.errorhandler(StoreTimeout)
    def _store_timeout(e: StoreTimeout):
        return fail("The database did not respond in time, please retry", 503)

    @app.errorhandler(StoreError)
    def _store_error(e: StoreError):
        return fail(f"Database error: {e}", 500)

    @app.errorhandler(BadRequest)
    def _bad_request(e: BadRequest):
        return fail(e.description or "Malformed request", 400)
