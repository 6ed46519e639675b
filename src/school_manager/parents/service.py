from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.timestamps import Timestamp
from ..common.validators import optional_email
from ..core.exceptions import NotFoundError
from .model import Parent
from .repository import ParentRepository

logger = logging.getLogger(__name__)


class ParentService:
    def __init__(self, parents: ParentRepository):
        self._parents = parents

    def create(self, parent: Parent) -> Parent:
        optional_email(parent.email)
        if parent.created_at is None:
            parent.created_at = Timestamp.now()
        self._parents.create(parent)
        logger.info("Parent %s created", parent.parent_id)
        return parent

    def list_all(self) -> Sequence[Parent]:
        return self._parents.list_all()

    def get(self, parent_id: str) -> Optional[Parent]:
        return self._parents.get_by_id(parent_id)

    def find_by_uid(self, uid: str) -> Optional[Parent]:
        """First parent profile linked to an auth uid, if any."""

        parents = self._parents.list_by_uid(uid)
        return parents[0] if parents else None

    def update(self, parent_id: str, parent: Parent) -> Parent:
        existing = self._parents.get_by_id(parent_id)
        if existing is None:
            raise NotFoundError(f"Parent not found with ID: {parent_id}")

        optional_email(parent.email)
        parent.parent_id = parent_id
        if parent.created_at is None:
            parent.created_at = existing.created_at
        self._parents.save(parent_id, parent)
        logger.info("Parent %s updated", parent_id)
        return parent

    def delete(self, parent_id: str) -> None:
        if self._parents.get_by_id(parent_id) is None:
            raise NotFoundError(f"Parent not found with ID: {parent_id}")
        self._parents.delete(parent_id)
        logger.info("Parent %s deleted", parent_id)
