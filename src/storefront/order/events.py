"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    delivery_type = String(required=True)
    item_count = Integer(required=True)
    total_amount_cents = Integer(required=True)
    placed_at = DateTime(required=True)
