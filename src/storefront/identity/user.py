"""User aggregate: an account that can sign in and place orders."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from storefront.domain import storefront
from storefront.identity.events import RefreshTokenIssued, UserLoggedIn, UserRegistered
from storefront.shared.email import EmailAddress, normalize_email


class UserRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


class UserStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


@storefront.aggregate
class User:
    """A registered account. Customers own a cart, addresses and orders; admins manage the catalogue."""

    name = String(required=True, max_length=50)
    email = String(required=True, max_length=254, unique=True)
    password_hash = String(required=True, max_length=255)
    role = String(choices=UserRole, default=UserRole.CUSTOMER.value)
    status = String(choices=UserStatus, default=UserStatus.ACTIVE.value)
    refresh_token = Text()
    registered_at = DateTime()
    last_login_at = DateTime()

    @invariant.post
    def name_must_be_between_2_and_50_characters(self):
        if self.name is not None and not 2 <= len(self.name.strip()) <= 50:
            raise ValidationError({"name": ["Name must be between 2 and 50 characters"]})

    @classmethod
    def register(cls, name, email, password_hash, role=UserRole.CUSTOMER.value):
        email = normalize_email(email)
        EmailAddress(address=email)  # structural validation

        now = datetime.now(UTC)
        user = cls(
            name=name.strip(),
            email=email,
            password_hash=password_hash,
            role=role,
            status=UserStatus.ACTIVE.value,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=email,
                role=role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE.value

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def record_login(self, refresh_token):
        """Remember the refresh token handed out at sign-in."""
        now = datetime.now(UTC)
        self.last_login_at = now
        self.refresh_token = refresh_token
        self.raise_(UserLoggedIn(user_id=str(self.id), role=self.role, logged_in_at=now))

    def rotate_refresh_token(self, refresh_token):
        """Replace the stored refresh token after a successful refresh."""
        self.refresh_token = refresh_token
        self.raise_(RefreshTokenIssued(user_id=str(self.id), issued_at=datetime.now(UTC)))
