from __future__ import annotations

import pytest

from school_manager.core.exceptions import NotFoundError, ValidationError
from school_manager.parents.model import Parent


def test_create_and_find_by_uid(container):
    parent = container.parent_service.create(Parent(uid="uid-1", full_name="Naledi", email="naledi@school.test"))

    assert parent.parent_id
    assert parent.created_at is not None
    assert container.parent_service.find_by_uid("uid-1").parent_id == parent.parent_id
    assert container.parent_service.find_by_uid("uid-2") is None


def test_create_rejects_a_malformed_email(container):
    with pytest.raises(ValidationError, match="email"):
        container.parent_service.create(Parent(full_name="Naledi", email="not-an-email"))


def test_update_keeps_created_at(container):
    parent = container.parent_service.create(Parent(full_name="Naledi"))

    updated = container.parent_service.update(parent.parent_id, Parent(full_name="Naledi M", children_ids=["s1"]))

    assert updated.created_at == parent.created_at
    stored = container.parent_service.get(parent.parent_id)
    assert stored.full_name == "Naledi M"
    assert stored.children_ids == ["s1"]


def test_missing_parent(container):
    with pytest.raises(NotFoundError):
        container.parent_service.update("nope", Parent())
    with pytest.raises(NotFoundError):
        container.parent_service.delete("nope")


def test_delete(container):
    parent = container.parent_service.create(Parent(full_name="Naledi"))

    container.parent_service.delete(parent.parent_id)

    assert container.parent_service.list_all() == []
