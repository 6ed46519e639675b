from __future__ import annotations

import logging
from typing import Optional

from ..common.timestamps import Timestamp
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import UserRole
from ..core.exceptions import AuthenticationError, NotFoundError
from ..parents.model import Parent
from ..parents.repository import ParentRepository
from .identity import IdentityProvider
from .model import Registration, User, UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Use cases: register, login, password reset."""

    def __init__(self, users: UserRepository, parents: ParentRepository, identity: IdentityProvider):
        self._users = users
        self._parents = parents
        self._identity = identity

    def _parent_id_for(self, uid: str) -> Optional[str]:
        parents = self._parents.list_by_uid(uid)
        return parents[0].parent_id if parents else None

    def register(self, registration: Registration) -> UserProfile:
        email = require_email(registration.email)
        password = require_min_length(registration.password, "Password", MIN_PASSWORD_LENGTH)
        full_name = require_non_empty(registration.full_name, "Full name")

        uid = self._identity.create_user(email=email, password=password, display_name=full_name)

        now = Timestamp.now()
        user = User(
            uid=uid,
            email=email,
            full_name=full_name,
            phone_number=registration.phone_number,
            role=registration.role,
            created_at=now,
            active=True,
        )
        self._users.save(uid, user)

        parent_id = None
        if registration.role == UserRole.PARENT:
            parent = Parent(
                uid=uid,
                full_name=full_name,
                email=email,
                phone_number=registration.phone_number,
                address=registration.address,
                created_at=now,
            )
            parent_id = self._parents.create(parent)

        logger.info("User %s registered with role %s", uid, registration.role.value)
        return UserProfile(
            uid=uid,
            email=email,
            full_name=full_name,
            phone_number=registration.phone_number,
            role=registration.role,
            parent_id=parent_id,
        )

    def authenticate(self, email: Optional[str], password: Optional[str]) -> UserProfile:
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")

        if self._identity.get_user_by_email(email) is None:
            raise AuthenticationError(INVALID_CREDENTIALS)

        users = self._users.list_by_email(email)
        if not users:
            raise AuthenticationError(INVALID_CREDENTIALS)
        user = users[0]

        if not self._identity.verify_password(email, password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        parent_id = self._parent_id_for(user.uid) if user.role == UserRole.PARENT else None
        logger.info("User %s logged in", user.uid)
        return UserProfile(
            uid=user.uid,
            email=user.email,
            full_name=user.full_name,
            phone_number=user.phone_number,
            role=user.role,
            parent_id=parent_id,
        )

    def send_password_reset(self, email: Optional[str]) -> None:
        email = require_non_empty(email, "Email")
        if not self._users.list_by_email(email):
            raise NotFoundError("No user found with this email address")

        link = self._identity.generate_password_reset_link(email)
        # Delivery is handled by Firebase; the link is only logged for support.
        logger.debug("Password reset link for %s: %s", email, link)
        logger.info("Password reset requested for %s", email)

    def update_password(self, uid: Optional[str], new_password: Optional[str]) -> None:
        uid = require_non_empty(uid, "User ID")
        new_password = require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)
        self._identity.update_password(uid, new_password)
        logger.info("Password updated for user %s", uid)

    def get_user_by_email(self, email: Optional[str]) -> User:
        email = require_non_empty(email, "Email")
        users = self._users.list_by_email(email)
        if not users:
            raise NotFoundError("User not found")
        return users[0]
