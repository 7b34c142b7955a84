"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new account was created."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    role = String(required=True)
    registered_at = DateTime(required=True)


@storefront.event(part_of="User")
class UserLoggedIn:
    """A user signed in and received a fresh token pair."""

    __version__ = 1

    user_id = Identifier(required=True)
    role = String(required=True)
    logged_in_at = DateTime(required=True)


@storefront.event(part_of="User")
class RefreshTokenIssued:
    """A refresh token was exchanged for a new token pair."""

    __version__ = 1

    user_id = Identifier(required=True)
    issued_at = DateTime(required=True)
