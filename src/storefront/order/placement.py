"""Order placement: turns the caller's cart into a pending order.

Everything below runs in one unit of work: the order is added before the
cart is drained, and both commit together or not at all.
"""

from datetime import UTC, datetime

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.addresses.address import Address
from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.errors import (
    AddressForbidden,
    AddressNotFound,
    ArtifactGenerationFailed,
    EmptyCart,
    ProductUnavailable,
)
from storefront.order.order import DeliveryType, Order
from storefront.order.verification import get_generator
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    delivery_type = String(choices=DeliveryType, default=DeliveryType.STANDARD.value)


def verification_key(user_id, placed_at: datetime) -> str:
    millis = int(placed_at.timestamp()) * 1000 + placed_at.microsecond // 1000
    return f"{user_id}:{millis}"


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_user(command.user_id)
        if cart is None or cart.is_empty:
            raise EmptyCart()

        address = self._owned_address(command.user_id, command.address_id)
        lines = self._snapshot(cart)

        placed_at = datetime.now(UTC)
        artifact = self._verification_artifact(command.user_id, placed_at)

        order = Order.place(
            user_id=command.user_id,
            address_id=address.id,
            lines=lines,
            delivery_type=command.delivery_type,
            verification_artifact=artifact,
            placed_at=placed_at,
        )
        current_domain.repository_for(Order).add(order)

        cart.check_out(order.id)
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            user_id=str(command.user_id),
            order_id=str(order.id),
            cart_id=str(cart.id),
            address_id=str(address.id),
            total_amount_cents=order.total_amount_cents,
            item_count=len(lines),
        )
        return str(order.id)

    def _owned_address(self, user_id, address_id):
        try:
            address = current_domain.repository_for(Address).get(str(address_id))
        except ObjectNotFoundError:
            raise AddressNotFound() from None

        if not address.belongs_to(user_id):
            logger.warning("Address ownership mismatch", user_id=str(user_id), address_id=str(address_id))
            raise AddressForbidden()
        return address

    def _snapshot(self, cart):
        """Copy each cart line with the product's current price."""
        products = current_domain.repository_for(Product).find_many(i.product_id for i in cart.items)

        lines = []
        for item in sorted(cart.items, key=lambda i: i.added_at):
            product = products.get(str(item.product_id))
            if product is None:
                raise ProductUnavailable(errors=[{"field": "productId", "message": str(item.product_id)}])
            lines.append(
                {
                    "product_id": str(item.product_id),
                    "quantity": item.quantity,
                    "unit_price_cents": product.price_cents,
                }
            )
        return lines

    def _verification_artifact(self, user_id, placed_at):
        generator = get_generator()
        if generator is None:
            return None

        try:
            return generator.generate(verification_key(user_id, placed_at))
        except Exception as exc:
            if get_settings().verification_fail_open:
                logger.warning("Verification artifact skipped", user_id=str(user_id), error=str(exc))
                return None
            logger.error("Verification artifact failed", user_id=str(user_id), error=str(exc))
            raise ArtifactGenerationFailed() from exc
