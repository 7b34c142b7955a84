"""Order aggregate: an immutable, price-frozen snapshot of a cart.

Line prices are copied from the catalogue at placement time and the total is
computed once from those copies. Nothing on the order is ever recomputed from
live product data.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.order.events import OrderPlaced


class DeliveryType(Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    OVERNIGHT = "overnight"


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@storefront.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price_cents = Integer(required=True, min_value=0)

    @property
    def line_total_cents(self) -> int:
        return self.quantity * self.unit_price_cents


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total_amount_cents = Integer(required=True, min_value=0)
    delivery_type = String(choices=DeliveryType, default=DeliveryType.STANDARD.value)
    address_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    verification_artifact = Text()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_matches_lines(self):
        if self.items and self.total_amount_cents != sum(i.line_total_cents for i in self.items):
            raise ValidationError({"total_amount": ["Order total must equal the sum of its lines"]})

    @classmethod
    def place(cls, user_id, address_id, lines, delivery_type=None, verification_artifact=None, placed_at=None):
        """Create a pending order from ``lines``.

        Args:
            lines: Iterable of dicts with product_id, quantity, unit_price_cents.
        """
        lines = list(lines)
        if not lines:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        now = placed_at or datetime.now(UTC)
        items = [
            OrderItem(
                product_id=line["product_id"],
                quantity=line["quantity"],
                unit_price_cents=line["unit_price_cents"],
            )
            for line in lines
        ]
        order = cls(
            user_id=user_id,
            items=items,
            total_amount_cents=sum(item.line_total_cents for item in items),
            delivery_type=delivery_type or DeliveryType.STANDARD.value,
            address_id=address_id,
            status=OrderStatus.PENDING.value,
            verification_artifact=verification_artifact,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                address_id=str(address_id),
                delivery_type=order.delivery_type,
                item_count=len(items),
                total_amount_cents=order.total_amount_cents,
                placed_at=now,
            )
        )
        return order
