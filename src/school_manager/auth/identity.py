"""Identity provider: accounts and passwords live in Firebase Authentication."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import requests
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

SIGN_IN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"


@dataclass(frozen=True)
class IdentityUser:
    uid: str
    email: Optional[str]


class IdentityProvider(Protocol):
    def create_user(self, *, email: str, password: str, display_name: Optional[str]) -> str:
        """Create an account and return its uid."""

        raise NotImplementedError

    def get_user_by_email(self, email: str) -> Optional[IdentityUser]:
        raise NotImplementedError

    def update_password(self, uid: str, password: str) -> None:
        raise NotImplementedError

    def generate_password_reset_link(self, email: str) -> str:
        raise NotImplementedError

    def verify_password(self, email: str, password: str) -> bool:
        raise NotImplementedError


class FirebaseIdentityProvider:
    def __init__(self, app, *, api_key: Optional[str], timeout: float = 10.0):
        self._app = app
        self._api_key = api_key
        self._timeout = timeout

    def create_user(self, *, email: str, password: str, display_name: Optional[str]) -> str:
        try:
            record = auth.create_user(email=email, password=password, display_name=display_name, app=self._app)
        except auth.EmailAlreadyExistsError as exc:
            raise ValidationError("An account with this email already exists") from exc
        except (FirebaseError, ValueError) as exc:
            raise ValidationError(f"Registration failed: {exc}") from exc
        logger.info("Identity user created: %s", record.uid)
        return record.uid

    def get_user_by_email(self, email: str) -> Optional[IdentityUser]:
        try:
            record = auth.get_user_by_email(email, app=self._app)
        except (auth.UserNotFoundError, ValueError):
            return None
        return IdentityUser(uid=record.uid, email=record.email)

    def update_password(self, uid: str, password: str) -> None:
        try:
            auth.update_user(uid, password=password, app=self._app)
        except (FirebaseError, ValueError) as exc:
            raise ValidationError(f"Failed to reset password: {exc}") from exc

    def generate_password_reset_link(self, email: str) -> str:
        try:
            return auth.generate_password_reset_link(email, app=self._app)
        except (FirebaseError, ValueError) as exc:
            raise ValidationError(f"Failed to send password reset email: {exc}") from exc

    def verify_password(self, email: str, password: str) -> bool:
        """Check credentials against the Identity Toolkit REST API.

        The Admin SDK cannot verify passwords, so this signs in as the user.
        Any non-200 answer or transport failure counts as a wrong password.
        """

        if not self._api_key:
            logger.error("FIREBASE_API_KEY is not configured; password verification disabled")
            return False

        try:
            resp = requests.post(
                SIGN_IN_URL,
                params={"key": self._api_key},
                json={"email": email, "password": password, "returnSecureToken": True},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Password verification request failed: %s", exc)
            return False
        return resp.status_code == 200
