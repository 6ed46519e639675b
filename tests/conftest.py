from __future__ import annotations

import threading
import uuid
from typing import Any, Optional

import pytest

from school_manager.container import assemble
from school_manager.core.exceptions import ValidationError
from school_manager.database.firestore_store import FirestoreStore
from school_manager.main import create_app


def _copy(value: Any) -> Any:
    # Leaves (datetimes included) are immutable; only containers need copying.
    if isinstance(value, dict):
        return {k: _copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy(v) for v in value]
    return value


class FakeSnapshot:
    def __init__(self, doc_id: str, data: Optional[dict]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[dict]:
        return _copy(self._data) if self._data is not None else None


class FakeDocumentRef:
    def __init__(self, client: "FakeFirestoreClient", collection: str, doc_id: str):
        self._client = client
        self._collection = collection
        self.id = doc_id

    def set(self, data: dict, timeout=None) -> None:
        self._client._before_call()
        self._client.data.setdefault(self._collection, {})[self.id] = _copy(data)

    def get(self, timeout=None) -> FakeSnapshot:
        self._client._before_call()
        return FakeSnapshot(self.id, self._client.data.get(self._collection, {}).get(self.id))

    def delete(self, timeout=None) -> None:
        self._client._before_call()
        self._client.data.get(self._collection, {}).pop(self.id, None)


class FakeQuery:
    def __init__(self, client: "FakeFirestoreClient", collection: str, filters=(), limit: Optional[int] = None):
        self._client = client
        self._collection = collection
        self._filters = tuple(filters)
        self._limit = limit

    def where(self, *, filter) -> "FakeQuery":
        assert filter.op_string == "=="
        return FakeQuery(self._client, self._collection, self._filters + (filter,), self._limit)

    def limit(self, count: int) -> "FakeQuery":
        return FakeQuery(self._client, self._collection, self._filters, count)

    def get(self, timeout=None) -> list[FakeSnapshot]:
        self._client._before_call()
        self._client.queries.append((self._collection, [(f.field_path, f.value) for f in self._filters]))
        docs = self._client.data.get(self._collection, {})
        results = [
            FakeSnapshot(doc_id, data)
            for doc_id, data in docs.items()
            if all(data.get(f.field_path) == f.value for f in self._filters)
        ]
        return results[: self._limit] if self._limit is not None else results


class FakeCollection(FakeQuery):
    def document(self, doc_id: Optional[str] = None) -> FakeDocumentRef:
        return FakeDocumentRef(self._client, self._collection, doc_id or uuid.uuid4().hex[:20])


class FakeFirestoreClient:
    """In-memory stand-in for ``google.cloud.firestore.Client``.

    ``fail_with`` makes every call raise; ``gate`` (an Event) makes every call
    wait until it is set.
    """

    def __init__(self):
        self.data: dict[str, dict[str, dict]] = {}
        self.queries: list[tuple[str, list]] = []
        self.fail_with: Optional[BaseException] = None
        self.gate: Optional[threading.Event] = None

    def _before_call(self) -> None:
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.fail_with is not None:
            raise self.fail_with

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)


class FakeIdentityProvider:
    def __init__(self):
        self.accounts: dict[str, dict] = {}
        self.reset_links: list[str] = []
        self.reachable = True

    def create_user(self, *, email, password, display_name) -> str:
        if email in self.accounts:
            raise ValidationError("An account with this email already exists")
        uid = "uid-" + uuid.uuid4().hex[:8]
        self.accounts[email] = {"uid": uid, "password": password, "display_name": display_name}
        return uid

    def get_user_by_email(self, email):
        from school_manager.auth.identity import IdentityUser

        account = self.accounts.get(email)
        return IdentityUser(uid=account["uid"], email=email) if account else None

    def update_password(self, uid, password) -> None:
        for account in self.accounts.values():
            if account["uid"] == uid:
                account["password"] = password
                return
        raise ValidationError("Failed to reset password: user not found")

    def generate_password_reset_link(self, email) -> str:
        link = f"https://example.test/reset?email={email}"
        self.reset_links.append(link)
        return link

    def verify_password(self, email, password) -> bool:
        if not self.reachable:
            return False
        account = self.accounts.get(email)
        return bool(account) and account["password"] == password


@pytest.fixture
def fake_client() -> FakeFirestoreClient:
    return FakeFirestoreClient()


@pytest.fixture
def store(fake_client):
    s = FirestoreStore(fake_client, timeout=2, health_timeout=1, max_workers=4)
    yield s
    s.close()


@pytest.fixture
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def container(store, identity):
    return assemble(store, identity)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
