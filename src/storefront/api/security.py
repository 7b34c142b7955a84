"""Bearer-token dependencies for the Storefront API."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.errors import AdminRequired, InvalidToken, MissingToken
from storefront.identity.tokens import ACCESS, decode_token
from storefront.identity.user import User
from storefront.utils.logging import bind_user

bearer_scheme = HTTPBearer(auto_error=False)


async def current_user(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)) -> User:
    """Resolve the caller from ``Authorization: Bearer <token>``."""
    if credentials is None or not credentials.credentials:
        raise MissingToken()

    user_id = decode_token(credentials.credentials, ACCESS)
    try:
        user = current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise InvalidToken("User not found or deleted") from None

    bind_user(user.id)
    return user


async def admin_user(user: User = Depends(current_user)) -> User:
    if not user.is_admin:
        raise AdminRequired()
    return user
