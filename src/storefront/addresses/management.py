"""Address book management: command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.addresses.address import Address
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Address")
class AddAddress:
    """Add an address; with ``is_default`` it replaces the user's current default."""

    user_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    is_default = Boolean(default=False)


@storefront.command_handler(part_of=Address)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(Address)

        if command.is_default:
            for existing in repo.for_user(command.user_id):
                if existing.is_default:
                    existing.clear_default()
                    repo.add(existing)

        address = Address.create(
            user_id=command.user_id,
            street=command.street,
            city=command.city,
            zip_code=command.zip_code,
            country=command.country,
            is_default=command.is_default,
        )
        repo.add(address)

        logger.info(
            "Address added",
            user_id=str(command.user_id),
            address_id=str(address.id),
            is_default=address.is_default,
        )
        return str(address.id)
