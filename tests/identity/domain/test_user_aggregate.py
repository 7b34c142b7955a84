"""Tests for the User aggregate."""

import pytest
from protean.exceptions import ValidationError

from storefront.identity.events import RefreshTokenIssued, UserLoggedIn, UserRegistered
from storefront.identity.user import User, UserRole, UserStatus


def _register(**overrides):
    defaults = {
        "name": "Jane Doe",
        "email": "Jane@Example.com",
        "password_hash": "hashed",
    }
    defaults.update(overrides)
    return User.register(**defaults)


class TestRegistration:
    def test_defaults(self):
        user = _register()
        assert user.email == "jane@example.com"
        assert user.role == UserRole.CUSTOMER.value
        assert user.status == UserStatus.ACTIVE.value
        assert user.registered_at is not None
        assert user.is_active
        assert not user.is_admin

    def test_admin_role(self):
        user = _register(role=UserRole.ADMIN.value)
        assert user.is_admin

    def test_raises_registered_event(self):
        user = _register()
        events = [e for e in user._events if isinstance(e, UserRegistered)]
        assert len(events) == 1
        assert events[0].email == "jane@example.com"
        assert events[0].user_id == str(user.id)

    def test_name_too_short(self):
        with pytest.raises(ValidationError):
            _register(name="J")

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            _register(name="J" * 51)

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            _register(email="not-an-email")


class TestSessions:
    def test_record_login(self):
        user = _register()
        user._events.clear()
        user.record_login("refresh-1")

        assert user.refresh_token == "refresh-1"
        assert user.last_login_at is not None
        assert isinstance(user._events[0], UserLoggedIn)

    def test_rotate_refresh_token(self):
        user = _register()
        user.record_login("refresh-1")
        user._events.clear()
        user.rotate_refresh_token("refresh-2")

        assert user.refresh_token == "refresh-2"
        assert isinstance(user._events[0], RefreshTokenIssued)

    def test_inactive_user(self):
        user = _register()
        user.status = UserStatus.SUSPENDED.value
        assert not user.is_active
