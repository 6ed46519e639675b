from __future__ import annotations

from typing import Any, ClassVar, Generic, Optional, Sequence, TypeVar

from ..common.records import Record
from .firestore_store import FirestoreStore

R = TypeVar("R", bound=Record)


class FirestoreRepository(Generic[R]):
    """One collection of one entity type.

    Subclasses set ``collection`` and ``model`` and add their own equality
    queries on top of :meth:`list_by`.
    """

    collection: ClassVar[str]
    model: ClassVar[type]

    def __init__(self, store: FirestoreStore):
        self._store = store

    def create(self, record: R) -> str:
        return self._store.join(self._store.create(self.collection, record))

    def save(self, identifier: str, record: R) -> None:
        self._store.join(self._store.upsert(self.collection, identifier, record))

    def get_by_id(self, identifier: str) -> Optional[R]:
        data = self._store.join(self._store.get_by_id(self.collection, identifier))
        return self.model.from_document(data) if data is not None else None

    def list_all(self) -> Sequence[R]:
        rows = self._store.join(self._store.get_all(self.collection))
        return [self.model.from_document(row) for row in rows]

    def list_by(self, field: str, value: Any) -> Sequence[R]:
        rows = self._store.join(self._store.get_by_field(self.collection, field, value))
        return [self.model.from_document(row) for row in rows]

    def delete(self, identifier: str) -> None:
        self._store.join(self._store.delete(self.collection, identifier))
