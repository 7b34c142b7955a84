"""Repository for the Cart aggregate."""

from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.repository(part_of=Cart)
class CartRepository:
    def for_user(self, user_id) -> Cart | None:
        """The user's cart, or None if they never added anything."""
        carts = self._dao.query.filter(user_id=str(user_id)).limit(1).all().items
        return carts[0] if carts else None
