"""Repository for the Address aggregate."""

from storefront.addresses.address import Address
from storefront.domain import storefront


@storefront.repository(part_of=Address)
class AddressRepository:
    def for_user(self, user_id) -> list[Address]:
        """All addresses owned by ``user_id``, oldest first."""
        return self._dao.query.filter(user_id=str(user_id)).order_by("created_at").limit(None).all().items
