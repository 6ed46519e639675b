from __future__ import annotations

from typing import Sequence

from ..database.firestore_repository import FirestoreRepository
from .model import Parent


class FirestoreParentRepository(FirestoreRepository[Parent]):
    collection = "parents"
    model = Parent

    def list_by_uid(self, uid: str) -> Sequence[Parent]:
        return self.list_by("uid", uid)
