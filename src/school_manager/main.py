from __future__ import annotations

import atexit
import importlib
import logging
from fnmatch import fnmatch
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request

from .config import get_settings_module

from .admin.controller import register as register_admin
from .auth.controller import register as register_auth
from .common.responses import register_error_handlers
from .container import Container, build_container
from .core.constants import (
    API_PREFIX,
    DEFAULT_BODY_TIMEZONE,
    DEFAULT_HEALTH_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_TIMEZONE,
    DEFAULT_STORE_MAX_WORKERS,
    DEFAULT_STORE_TIMEOUT_SECONDS,
)
from .documents.controller import register as register_documents
from .health.controller import register as register_health
from .meetings.controller import register as register_meetings
from .parents.controller import register as register_parents
from .payments.controller import register as register_payments
from .students.controller import register as register_students
from .trips.controller import register as register_trips

logger = logging.getLogger(__name__)

CORS_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_MAX_AGE = "3600"


def _install_cors(app: Flask, origins: list[str]) -> None:
    @app.after_request
    def _cors_headers(response):
        origin = request.headers.get("Origin")
        if origin and request.path.startswith(f"{API_PREFIX}/") and any(fnmatch(origin, p) for p in origins):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = CORS_METHODS
            response.headers["Access-Control-Allow-Headers"] = request.headers.get(
                "Access-Control-Request-Headers", "*"
            )
            response.headers["Access-Control-Allow-Credentials"] = "true"
            response.headers["Access-Control-Max-Age"] = CORS_MAX_AGE
            response.headers.add("Vary", "Origin")
        return response


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting with settings=%s", settings_module)

    if container is None:
        container = build_container(
            firebase_config=getattr(settings, "FIREBASE_CONFIG"),
            store_timeout=getattr(settings, "STORE_TIMEOUT_SECONDS", DEFAULT_STORE_TIMEOUT_SECONDS),
            health_timeout=getattr(settings, "HEALTH_TIMEOUT_SECONDS", DEFAULT_HEALTH_TIMEOUT_SECONDS),
            max_workers=getattr(settings, "STORE_MAX_WORKERS", DEFAULT_STORE_MAX_WORKERS),
            request_timezone=getattr(settings, "REQUEST_TIMEZONE", DEFAULT_REQUEST_TIMEZONE),
            body_timezone=getattr(settings, "BODY_TIMEZONE", DEFAULT_BODY_TIMEZONE),
        )
        atexit.register(container.store.close)

    _install_cors(app, list(getattr(settings, "CORS_ORIGINS", [])))
    register_error_handlers(app)

    register_auth(app, container)
    register_students(app, container)
    register_parents(app, container)
    register_trips(app, container)
    register_payments(app, container)
    register_meetings(app, container)
    register_documents(app, container)
    register_admin(app, container)
    register_health(app, container)

    app.extensions["container"] = container
    return app
