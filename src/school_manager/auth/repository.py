from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    def save(self, uid: str, user: User) -> None:
        """Create or replace ``users/{uid}``."""

        raise NotImplementedError

    def get_by_id(self, uid: str) -> Optional[User]:
        raise NotImplementedError

    def list_by_email(self, email: str) -> Sequence[User]:
        raise NotImplementedError
