from __future__ import annotations

import pytest

from school_manager.auth.model import Registration
from school_manager.core.enums import UserRole
from school_manager.core.exceptions import AuthenticationError, NotFoundError, ValidationError


def _register(container, **overrides):
    values = dict(email="naledi@school.test", password="secret1", full_name="Naledi Mokoena", phone_number="0821234567")
    values.update(overrides)
    return container.auth_service.register(Registration(**values))


def test_register_parent_creates_user_and_parent_profile(container, identity):
    profile = _register(container)

    assert profile.role is UserRole.PARENT
    assert profile.uid == identity.accounts["naledi@school.test"]["uid"]
    user = container.users_repo.get_by_id(profile.uid)
    assert user.email == "naledi@school.test"
    assert user.active is True
    parent = container.parent_service.get(profile.parent_id)
    assert parent.uid == profile.uid
    assert parent.full_name == "Naledi Mokoena"


def test_register_admin_creates_no_parent_profile(container):
    profile = _register(container, role=UserRole.ADMIN)

    assert profile.parent_id is None
    assert container.parent_service.list_all() == []


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"email": "bad"}, "valid email"),
        ({"password": "12345"}, "at least 6"),
        ({"full_name": ""}, "Full name"),
    ],
)
def test_register_validates_input(container, overrides, message):
    with pytest.raises(ValidationError, match=message):
        _register(container, **overrides)


def test_register_with_a_taken_email(container):
    _register(container)

    with pytest.raises(ValidationError):
        _register(container)


def test_authenticate(container):
    registered = _register(container)

    profile = container.auth_service.authenticate("naledi@school.test", "secret1")

    assert profile.uid == registered.uid
    assert profile.parent_id == registered.parent_id


@pytest.mark.parametrize("email,password", [("naledi@school.test", "wrong!"), ("nobody@school.test", "secret1")])
def test_authenticate_rejects_bad_credentials(container, email, password):
    _register(container)

    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        container.auth_service.authenticate(email, password)


def test_authenticate_fails_closed_when_the_identity_service_is_unreachable(container, identity):
    _register(container)
    identity.reachable = False

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("naledi@school.test", "secret1")


def test_password_reset_needs_a_known_user(container, identity):
    with pytest.raises(NotFoundError, match="No user found"):
        container.auth_service.send_password_reset("nobody@school.test")

    _register(container)
    container.auth_service.send_password_reset("naledi@school.test")
    assert len(identity.reset_links) == 1


def test_update_password(container):
    profile = _register(container)

    with pytest.raises(ValidationError):
        container.auth_service.update_password(profile.uid, "123")

    container.auth_service.update_password(profile.uid, "newsecret")
    assert container.auth_service.authenticate("naledi@school.test", "newsecret").uid == profile.uid


def test_get_user_by_email(container):
    profile = _register(container)

    assert container.auth_service.get_user_by_email("naledi@school.test").uid == profile.uid
    with pytest.raises(NotFoundError, match="User not found"):
        container.auth_service.get_user_by_email("nobody@school.test")
