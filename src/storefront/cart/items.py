"""Cart line management: commands and handler.

Each handler returns the cart id so the API can render the cart afterwards
through :func:`storefront.cart.view.cart_view`.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import CartNotFound, ProductNotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command(part_of="Cart")
class IncreaseCartItem:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class CartItemsHandler:
    def _existing_cart(self, repo, user_id):
        cart = repo.for_user(user_id)
        if cart is None:
            raise CartNotFound()
        return cart

    @handle(AddToCart)
    def add_to_cart(self, command):
        if current_domain.repository_for(Product).find(command.product_id) is None:
            raise ProductNotFound()

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id) or Cart.create(user_id=command.user_id)
        cart.add_item(command.product_id, command.quantity or 1)
        repo.add(cart)

        logger.info(
            "Cart item added",
            user_id=str(command.user_id),
            cart_id=str(cart.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = self._existing_cart(repo, command.user_id)
        cart.remove_item(command.item_id)
        repo.add(cart)

        logger.info("Cart item removed", user_id=str(command.user_id), cart_id=str(cart.id))
        return str(cart.id)

    @handle(IncreaseCartItem)
    def increase_cart_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = self._existing_cart(repo, command.user_id)
        cart.increase_item(command.item_id)
        repo.add(cart)

        logger.info("Cart item increased", user_id=str(command.user_id), cart_id=str(cart.id))
        return str(cart.id)
