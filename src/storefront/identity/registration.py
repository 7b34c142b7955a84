"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import EmailInUse
from storefront.identity.passwords import MIN_PASSWORD_LENGTH, hash_password
from storefront.identity.tokens import issue_token_pair
from storefront.identity.user import User, UserRole
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a customer account (or an admin, from the management CLI)."""

    name = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=128)
    role = String(choices=UserRole, default=UserRole.CUSTOMER.value)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        if len(command.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                {"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"]}
            )

        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise EmailInUse()

        user = User.register(
            name=command.name,
            email=command.email,
            password_hash=hash_password(command.password),
            role=command.role or UserRole.CUSTOMER.value,
        )
        tokens = issue_token_pair(user.id)
        user.record_login(tokens.refresh_token)
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), role=user.role)
        return {
            "user_id": str(user.id),
            "token": tokens.access_token,
            "refresh_token": tokens.refresh_token,
        }
