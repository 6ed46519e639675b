"""Collection-scoped operations over Firestore.

Every operation is submitted to a worker pool and returns a ``Future``; the
caller decides where to block by calling :meth:`FirestoreStore.join`. There is
no cancel path: abandoning a join leaves the write in flight.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from google.api_core.exceptions import DeadlineExceeded
from google.cloud.firestore_v1.base_query import FieldFilter

from ..common.records import Identifiable
from ..core.constants import (
    DEFAULT_HEALTH_TIMEOUT_SECONDS,
    DEFAULT_STORE_MAX_WORKERS,
    DEFAULT_STORE_TIMEOUT_SECONDS,
)
from ..core.exceptions import StoreError, StoreTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Collection -> attribute that receives the generated document id on create.
ID_FIELDS: dict[str, str] = {
    "parents": "parentId",
    "students": "studentId",
    "announcements": "announcementId",
    "documentRequests": "requestId",
    "trips": "tripId",
    "meetings": "meetingId",
    "payments": "paymentId",
    "documents": "documentId",
}

HEALTH_COLLECTION = "health_check"


def _to_document(record: Any) -> dict[str, Any]:
    if hasattr(record, "to_document"):
        return record.to_document()
    if isinstance(record, Mapping):
        return dict(record)
    raise StoreError(f"Cannot persist value of type {type(record).__name__}")


def _query_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class FirestoreStore:
    def __init__(
        self,
        client,
        *,
        timeout: float = DEFAULT_STORE_TIMEOUT_SECONDS,
        health_timeout: float = DEFAULT_HEALTH_TIMEOUT_SECONDS,
        max_workers: int = DEFAULT_STORE_MAX_WORKERS,
    ):
        self._client = client
        self._timeout = float(timeout)
        self._health_timeout = float(health_timeout)
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="firestore")

    @property
    def timeout(self) -> float:
        return self._timeout

    def _submit(self, action: str, collection: str, fn: Callable[[], T], *, identifier: Optional[str] = None) -> "Future[T]":
        def run() -> T:
            try:
                return fn()
            except DeadlineExceeded as exc:
                logger.error("Timeout %s (collection=%s, id=%s)", action, collection, identifier, exc_info=True)
                raise StoreTimeout(f"Timeout {action} in Firestore") from exc
            except StoreError:
                raise
            except Exception as exc:
                logger.error("Error %s (collection=%s, id=%s)", action, collection, identifier, exc_info=True)
                raise StoreError(f"Error {action} in Firestore: {exc}") from exc

        return self._executor.submit(run)

    def join(self, future: "Future[T]") -> T:
        """Block until the operation finishes, at most ``timeout`` seconds."""

        try:
            return future.result(timeout=self._timeout)
        except FutureTimeout as exc:
            raise StoreTimeout("Timed out waiting for Firestore") from exc

    def _fill_id(self, collection: str, snapshot) -> dict[str, Any]:
        data = snapshot.to_dict() or {}
        id_field = ID_FIELDS.get(collection)
        if id_field and not data.get(id_field):
            data[id_field] = snapshot.id
        return data

    def _assign_id(self, collection: str, record: Any, identifier: str) -> None:
        id_field = ID_FIELDS.get(collection)
        if id_field is None:
            return
        if isinstance(record, MutableMapping):
            record[id_field] = identifier
        elif isinstance(record, Identifiable):
            record.assign_id(identifier)
        else:
            logger.debug("Record %s has no way to receive %s; saving without it", type(record).__name__, id_field)
            return
        logger.debug("Set %s to %s on record", id_field, identifier)

    def create(self, collection: str, record: Any) -> "Future[str]":
        def op() -> str:
            doc_ref = self._client.collection(collection).document()
            identifier = doc_ref.id
            self._assign_id(collection, record, identifier)
            doc_ref.set(_to_document(record), timeout=self._timeout)
            logger.debug("Document saved to collection '%s' with ID: %s", collection, identifier)
            return identifier

        return self._submit("saving document", collection, op)

    def upsert(self, collection: str, identifier: str, record: Any) -> "Future[None]":
        def op() -> None:
            doc_ref = self._client.collection(collection).document(identifier)
            doc_ref.set(_to_document(record), timeout=self._timeout)
            logger.debug("Document saved to collection '%s' with ID: %s", collection, identifier)

        return self._submit("saving document", collection, op, identifier=identifier)

    def get_by_id(self, collection: str, identifier: str) -> "Future[Optional[dict[str, Any]]]":
        def op() -> Optional[dict[str, Any]]:
            snapshot = self._client.collection(collection).document(identifier).get(timeout=self._timeout)
            if not snapshot.exists:
                logger.debug("Document not found in collection '%s' with ID: %s", collection, identifier)
                return None
            return self._fill_id(collection, snapshot)

        return self._submit("finding document", collection, op, identifier=identifier)

    def get_all(self, collection: str) -> "Future[list[dict[str, Any]]]":
        def op() -> list[dict[str, Any]]:
            snapshots = self._client.collection(collection).get(timeout=self._timeout)
            results = [self._fill_id(collection, snap) for snap in snapshots]
            logger.debug("Found %d documents in collection '%s'", len(results), collection)
            return results

        return self._submit("finding documents", collection, op)

    def get_by_field(self, collection: str, field: str, value: Any) -> "Future[list[dict[str, Any]]]":
        def op() -> list[dict[str, Any]]:
            query = self._client.collection(collection).where(filter=FieldFilter(field, "==", _query_value(value)))
            results = [self._fill_id(collection, snap) for snap in query.get(timeout=self._timeout)]
            logger.debug("Found %d documents in collection '%s' where %s = %s", len(results), collection, field, value)
            return results

        return self._submit(f"querying documents by {field}", collection, op)

    def delete(self, collection: str, identifier: str) -> "Future[None]":
        def op() -> None:
            self._client.collection(collection).document(identifier).delete(timeout=self._timeout)
            logger.debug("Document deleted from collection '%s' with ID: %s", collection, identifier)

        return self._submit("deleting document", collection, op, identifier=identifier)

    def health_check(self) -> bool:
        """Trivial bounded read; never raises."""

        try:
            future = self._executor.submit(
                lambda: self._client.collection(HEALTH_COLLECTION).limit(1).get(timeout=self._health_timeout)
            )
            future.result(timeout=self._health_timeout)
            return True
        except Exception as exc:
            logger.warning("Firestore health check failed: %s", exc)
            return False

    def close(self) -> None:
        self._executor.shutdown(wait=False)
