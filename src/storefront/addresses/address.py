"""Address aggregate: a shipping address in a user's address book."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Identifier, String

from storefront.addresses.events import AddressAdded, DefaultAddressCleared
from storefront.domain import storefront


@storefront.aggregate
class Address:
    """A shipping address owned by exactly one user.

    At most one address per user carries ``is_default``; the add-address
    handler clears the previous default in the same unit of work.
    """

    user_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    is_default = Boolean(default=False)
    created_at = DateTime()

    @classmethod
    def create(cls, user_id, street, city, zip_code, country, is_default=False):
        now = datetime.now(UTC)
        address = cls(
            user_id=user_id,
            street=street,
            city=city,
            zip_code=zip_code,
            country=country,
            is_default=bool(is_default),
            created_at=now,
        )
        address.raise_(
            AddressAdded(
                address_id=str(address.id),
                user_id=str(user_id),
                is_default=bool(is_default),
            )
        )
        return address

    def belongs_to(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    def clear_default(self):
        if not self.is_default:
            return
        self.is_default = False
        self.raise_(DefaultAddressCleared(address_id=str(self.id), user_id=str(self.user_id)))
