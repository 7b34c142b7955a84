"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """The user's full order history, newest first."""
        # limit() goes last: every other clone falls back to the entity's default page size
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").limit(None).all().items
