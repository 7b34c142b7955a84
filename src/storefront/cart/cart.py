"""Cart aggregate: one mutable basket of product selections per user.

The cart is created lazily on the first add and is never deleted; placing an
order drains its lines but keeps the record.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.cart.events import CartCheckedOut, CartItemAdded, CartItemIncreased, CartItemRemoved
from storefront.domain import storefront
from storefront.errors import CartItemNotFound


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product may appear only once in a cart"]})

    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def line_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def add_item(self, product_id, quantity=1):
        """Add ``quantity`` of a product, merging into an existing line for it."""
        now = datetime.now(UTC)

        existing = self.line_for(product_id)
        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            line = CartItem(product_id=product_id, quantity=quantity, added_at=now)
            self.add_items(line)
            item_id = str(line.id)

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=item_id,
                product_id=str(product_id),
                quantity=quantity,
            )
        )

    def remove_item(self, item_id):
        """Drop a line. Removing a line that is not there changes nothing."""
        line = self.item(item_id)
        if line is None:
            return

        self.remove_items(line)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item_id),
                product_id=str(line.product_id),
            )
        )

    def increase_item(self, item_id):
        line = self.item(item_id)
        if line is None:
            raise CartItemNotFound()

        line.quantity += 1
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemIncreased(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item_id),
                new_quantity=line.quantity,
            )
        )

    def check_out(self, order_id):
        """Empty the cart after its lines became order ``order_id``."""
        item_count = len(self.items)
        for line in list(self.items):
            self.remove_items(line)

        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                order_id=str(order_id),
                item_count=item_count,
            )
        )
