"""Read-side join for the cart: resolves each line's product for display.

Runs after the command has committed, outside the unit of work. A line whose
product has been removed from the catalogue renders with ``product: None``.
"""

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.catalogue.view import product_view


def cart_view(user_id) -> dict:
    """The user's cart with products resolved, or ``{"items": []}`` when there is none."""
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        return {"items": []}

    products = current_domain.repository_for(Product).find_many(i.product_id for i in cart.items)
    lines = sorted(cart.items, key=lambda i: i.added_at)
    return {
        "id": str(cart.id),
        "user_id": str(cart.user_id),
        "items": [
            {
                "id": str(line.id),
                "product_id": str(line.product_id),
                "product": _resolve(products, line.product_id),
                "quantity": line.quantity,
            }
            for line in lines
        ],
        "created_at": cart.created_at,
        "updated_at": cart.updated_at,
    }


def _resolve(products, product_id):
    product = products.get(str(product_id))
    return product_view(product) if product is not None else None
