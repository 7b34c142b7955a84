"""Read-side rendering of users. Never exposes the password hash or stored refresh token."""

from storefront.identity.user import User


def user_view(user: User) -> dict:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "status": user.status,
        "registered_at": user.registered_at,
        "last_login_at": user.last_login_at,
    }
