"""JWT access and refresh tokens.

Access and refresh tokens are signed with different secrets and carry a
``type`` claim, so one can never be used in place of the other.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt

from storefront.config import get_settings
from storefront.errors import InvalidToken, TokenExpired

ALGORITHM = "HS256"
ACCESS = "access"
REFRESH = "refresh"


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


def _secret_for(token_type: str) -> str:
    settings = get_settings()
    return settings.jwt_secret if token_type == ACCESS else settings.jwt_refresh_secret


def _encode(user_id, token_type: str, expires_delta: timedelta) -> str:
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "type": token_type,
        "iat": now,
        "exp": now + expires_delta,
        "jti": uuid4().hex,
    }
    return jwt.encode(payload, _secret_for(token_type), algorithm=ALGORITHM)


def create_access_token(user_id, expires_delta: timedelta | None = None) -> str:
    return _encode(user_id, ACCESS, expires_delta or get_settings().access_token_ttl)


def create_refresh_token(user_id, expires_delta: timedelta | None = None) -> str:
    return _encode(user_id, REFRESH, expires_delta or get_settings().refresh_token_ttl)


def issue_token_pair(user_id) -> TokenPair:
    return TokenPair(
        access_token=create_access_token(user_id),
        refresh_token=create_refresh_token(user_id),
    )


def decode_token(token: str, token_type: str = ACCESS) -> str:
    """Verify ``token`` and return the user id it was issued for.

    Raises ``TokenExpired`` for a well-formed token past its expiry and
    ``InvalidToken`` for anything else.
    """
    try:
        payload = jwt.decode(token, _secret_for(token_type), algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise TokenExpired(
            "Refresh token has expired" if token_type == REFRESH else "Access token has expired"
        ) from None
    except jwt.InvalidTokenError:
        raise InvalidToken("Invalid refresh token" if token_type == REFRESH else "Invalid or expired token") from None

    if payload.get("type") != token_type or not payload.get("sub"):
        raise InvalidToken("Invalid refresh token" if token_type == REFRESH else "Invalid or expired token")

    return payload["sub"]
