"""Storefront API package."""

from storefront.api.application import create_app
from storefront.api.errors import register_exception_handlers
from storefront.api.routes import (
    address_router,
    admin_router,
    auth_router,
    cart_router,
    order_router,
    product_router,
)

__all__ = [
    "address_router",
    "admin_router",
    "auth_router",
    "cart_router",
    "create_app",
    "order_router",
    "product_router",
    "register_exception_handlers",
]
