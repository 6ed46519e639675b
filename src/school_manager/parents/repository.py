from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Parent


class ParentRepository(Protocol):
    def create(self, parent: Parent) -> str:
        raise NotImplementedError

    def save(self, parent_id: str, parent: Parent) -> None:
        raise NotImplementedError

    def get_by_id(self, parent_id: str) -> Optional[Parent]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Parent]:
        raise NotImplementedError

    def list_by_uid(self, uid: str) -> Sequence[Parent]:
        raise NotImplementedError

    def delete(self, parent_id: str) -> None:
        raise NotImplementedError
