"""Application tests for user registration."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.errors import EmailInUse
from storefront.identity.passwords import verify_password
from storefront.identity.registration import RegisterUser
from storefront.identity.tokens import REFRESH, decode_token
from storefront.identity.user import User, UserRole


def _register(**overrides):
    defaults = {"name": "Jane Doe", "email": "jane@example.com", "password": "secret1"}
    defaults.update(overrides)
    return current_domain.process(RegisterUser(**defaults), asynchronous=False)


class TestRegisterUser:
    def test_persists_user_with_hashed_password(self):
        result = _register()
        user = current_domain.repository_for(User).get(result["user_id"])

        assert user.email == "jane@example.com"
        assert user.password_hash != "secret1"
        assert verify_password("secret1", user.password_hash)
        assert user.role == UserRole.CUSTOMER.value

    def test_returns_token_pair(self):
        result = _register()
        assert decode_token(result["token"]) == result["user_id"]
        assert decode_token(result["refresh_token"], REFRESH) == result["user_id"]

    def test_stores_refresh_token(self):
        result = _register()
        user = current_domain.repository_for(User).get(result["user_id"])
        assert user.refresh_token == result["refresh_token"]

    def test_duplicate_email_rejected(self):
        _register()
        with pytest.raises(EmailInUse):
            _register(email="JANE@example.com", name="Other Jane")

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _register(password="12345")
        assert "password" in exc.value.messages

    def test_admin_registration(self):
        result = _register(role=UserRole.ADMIN.value)
        user = current_domain.repository_for(User).get(result["user_id"])
        assert user.is_admin
