"""Sign-in and token refresh: commands and handler.

Signing in records the login time and stores the issued refresh token on
the user; refreshing only accepts the stored token and rotates it.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import AccountInactive, InvalidCredentials, InvalidToken, UserNotFound
from storefront.identity.passwords import verify_password
from storefront.identity.tokens import REFRESH, decode_token, issue_token_pair
from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class LogIn:
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=128)


@storefront.command(part_of="User")
class LogInAdmin:
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=128)


@storefront.command(part_of="User")
class RefreshSession:
    refresh_token = Text(required=True)


def _tokens_response(user, tokens):
    return {
        "user_id": str(user.id),
        "token": tokens.access_token,
        "refresh_token": tokens.refresh_token,
    }


@storefront.command_handler(part_of=User)
class AuthenticationHandler:
    @handle(LogIn)
    def log_in(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        if user is None or not verify_password(command.password, user.password_hash):
            raise InvalidCredentials()

        if not user.is_active:
            raise AccountInactive()

        tokens = issue_token_pair(user.id)
        user.record_login(tokens.refresh_token)
        repo.add(user)

        logger.info("User logged in", user_id=str(user.id))
        return _tokens_response(user, tokens)

    @handle(LogInAdmin)
    def log_in_admin(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        if user is None or not user.is_admin:
            raise InvalidCredentials()

        if not verify_password(command.password, user.password_hash):
            raise InvalidCredentials()

        if not user.is_active:
            raise AccountInactive()

        tokens = issue_token_pair(user.id)
        user.record_login(tokens.refresh_token)
        repo.add(user)

        logger.info("Admin logged in", user_id=str(user.id))
        return _tokens_response(user, tokens)

    @handle(RefreshSession)
    def refresh_session(self, command):
        user_id = decode_token(command.refresh_token, REFRESH)

        repo = current_domain.repository_for(User)
        try:
            user = repo.get(user_id)
        except ObjectNotFoundError:
            raise UserNotFound() from None

        if user.refresh_token != command.refresh_token:
            raise InvalidToken("Invalid refresh token")

        tokens = issue_token_pair(user.id)
        user.rotate_refresh_token(tokens.refresh_token)
        repo.add(user)

        logger.info("Refresh token rotated", user_id=str(user.id))
        return _tokens_response(user, tokens)
