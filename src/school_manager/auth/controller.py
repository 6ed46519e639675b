from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import json_body, ok
from ..common.validators import require_non_empty
from ..container import Container
from ..core.constants import API_PREFIX
from ..core.exceptions import DomainError, StoreError
from .model import Registration, UserProfile

logger = logging.getLogger(__name__)

RESET_SENT = "If an account exists with this email, you will receive a password reset link"


def register(app: Flask, container: Container) -> None:
    service = container.auth_service

    @app.route(f"{API_PREFIX}/auth/register", methods=["POST"], endpoint="register")
    def register_user():
        registration = Registration.from_json(json_body(), timestamps=container.body_timestamps)
        return ok(service.register(registration), "Registration successful")

    @app.route(f"{API_PREFIX}/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        return ok(service.authenticate(body.get("email"), body.get("password")), "Login successful")

    @app.route(f"{API_PREFIX}/auth/forgot-password", methods=["POST"], endpoint="forgot_password")
    def forgot_password():
        email = require_non_empty(json_body().get("email"), "Email")
        try:
            service.send_password_reset(email)
        except (DomainError, StoreError) as e:
            # Same answer whether or not the account exists.
            logger.info("Password reset not sent: %s", e)
        return ok("Password reset email sent", RESET_SENT)

    @app.route(f"{API_PREFIX}/auth/reset-password", methods=["POST"], endpoint="reset_password")
    def reset_password():
        body = json_body()
        service.update_password(body.get("uid"), body.get("newPassword"))
        return ok("Password updated successfully", "You can now login with your new password")

    @app.route(f"{API_PREFIX}/auth/user-by-email", methods=["GET"], endpoint="user_by_email")
    def user_by_email():
        user = service.get_user_by_email(request.args.get("email"))
        return ok(UserProfile(uid=user.uid, email=user.email, full_name=user.full_name, role=user.role))
