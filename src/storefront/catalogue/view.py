"""Read-side rendering of products."""

from storefront.catalogue.product import Product
from storefront.shared.money import cents_to_float


def product_view(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description or "",
        "price": cents_to_float(product.price_cents),
        "price_cents": product.price_cents,
        "image": product.image or "",
        "category": product.category,
        "stock": product.stock,
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }
