"""Read-side join for orders: resolves products and the shipping address.

Only display data is resolved. Quantities, unit prices and totals always come
from the order's own snapshot.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.addresses.address import Address
from storefront.addresses.view import address_view
from storefront.catalogue.product import Product
from storefront.catalogue.view import product_view
from storefront.order.order import Order
from storefront.shared.money import cents_to_float


def order_view(order: Order) -> dict:
    products = current_domain.repository_for(Product).find_many(i.product_id for i in order.items)
    address = _find_address(order.address_id)

    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "items": [
            {
                "id": str(item.id),
                "product_id": str(item.product_id),
                "product": _product(products, item.product_id),
                "quantity": item.quantity,
                "price": cents_to_float(item.unit_price_cents),
                "price_cents": item.unit_price_cents,
            }
            for item in order.items
        ],
        "total_amount": cents_to_float(order.total_amount_cents),
        "total_amount_cents": order.total_amount_cents,
        "delivery_type": order.delivery_type,
        "address_id": str(order.address_id),
        "address": address_view(address) if address is not None else None,
        "status": order.status,
        "verification_artifact": order.verification_artifact,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def order_view_by_id(order_id) -> dict:
    return order_view(current_domain.repository_for(Order).get(str(order_id)))


def orders_view(user_id) -> list[dict]:
    return [order_view(order) for order in current_domain.repository_for(Order).for_user(user_id)]


def _find_address(address_id):
    try:
        return current_domain.repository_for(Address).get(str(address_id))
    except ObjectNotFoundError:
        return None


def _product(products, product_id):
    product = products.get(str(product_id))
    return product_view(product) if product is not None else None
