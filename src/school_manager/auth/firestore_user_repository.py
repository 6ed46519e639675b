from __future__ import annotations

from typing import Sequence

from ..database.firestore_repository import FirestoreRepository
from .model import User


class FirestoreUserRepository(FirestoreRepository[User]):
    collection = "users"
    model = User

    def list_by_email(self, email: str) -> Sequence[User]:
        return self.list_by("email", email)
