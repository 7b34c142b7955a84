"""FastAPI routes for the Storefront: auth, catalogue, cart, address book and orders.

Writes go through Protean commands. Responses are rendered afterwards by the
read-side views, once the command's unit of work has committed.
"""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.addresses.address import Address
from storefront.addresses.management import AddAddress
from storefront.addresses.view import address_book_view, address_view
from storefront.api.schemas import (
    AddAddressRequest,
    AddProductRequest,
    AddressSchema,
    AddToCartRequest,
    AdminLoginResponse,
    AuthResponse,
    CartSchema,
    LoginRequest,
    MessageResponse,
    OrderSchema,
    PlaceOrderRequest,
    ProductCreatedResponse,
    ProductListResponse,
    ProductSchema,
    RefreshTokenRequest,
    RegisterRequest,
)
from storefront.api.security import admin_user, current_user
from storefront.cart.items import AddToCart, IncreaseCartItem, RemoveFromCart
from storefront.cart.view import cart_view
from storefront.catalogue.management import AddProduct, RemoveProduct
from storefront.catalogue.product import Product
from storefront.catalogue.view import product_view
from storefront.identity.authentication import LogIn, LogInAdmin, RefreshSession
from storefront.identity.registration import RegisterUser
from storefront.identity.user import User
from storefront.identity.view import user_view
from storefront.order.placement import PlaceOrder
from storefront.order.view import order_view_by_id, orders_view
from storefront.shared.money import to_cents
from storefront.utils.locks import process_for_user


def _user(user_id) -> dict:
    return user_view(current_domain.repository_for(User).get(user_id))


# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest):
    result = current_domain.process(
        RegisterUser(name=body.name, email=body.email, password=body.password),
        asynchronous=False,
    )
    return {
        "message": "User registered successfully",
        "data": {
            "user": _user(result["user_id"]),
            "token": result["token"],
            "refresh_token": result["refresh_token"],
        },
    }


@auth_router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest):
    result = current_domain.process(LogIn(email=body.email, password=body.password), asynchronous=False)
    return {
        "message": "Login successful",
        "data": {
            "user": _user(result["user_id"]),
            "token": result["token"],
            "refresh_token": result["refresh_token"],
        },
    }


@auth_router.post("/refresh-token", response_model=AuthResponse, response_model_exclude_none=True)
async def refresh_token(body: RefreshTokenRequest):
    result = current_domain.process(RefreshSession(refresh_token=body.refresh_token), asynchronous=False)
    return {
        "message": "Token refreshed successfully",
        "data": {"token": result["token"], "refresh_token": result["refresh_token"]},
    }


@auth_router.post("/admin/login", response_model=AdminLoginResponse)
async def admin_login(body: LoginRequest):
    result = current_domain.process(LogInAdmin(email=body.email, password=body.password), asynchronous=False)
    return {
        "access_token": result["token"],
        "refresh_token": result["refresh_token"],
        "user": _user(result["user_id"]),
    }


# ---------------------------------------------------------------------------
# Product Router (public)
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductSchema])
async def list_products():
    return [product_view(p) for p in current_domain.repository_for(Product).listing()]


@product_router.get("/search", response_model=list[ProductSchema])
async def search_products(q: str = Query(..., min_length=1)):
    return [product_view(p) for p in current_domain.repository_for(Product).search(q)]


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(admin_user)])


@admin_router.post("/products", status_code=201, response_model=ProductCreatedResponse)
async def add_product(body: AddProductRequest):
    product_id = current_domain.process(
        AddProduct(
            name=body.name,
            description=body.description,
            price_cents=to_cents(body.price),
            image=body.image,
            category=body.category,
            stock=body.stock,
        ),
        asynchronous=False,
    )
    return {"product": product_view(current_domain.repository_for(Product).get(product_id))}


@admin_router.delete("/products/{product_id}", response_model=MessageResponse)
async def remove_product(product_id: str):
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return {"message": "Product deleted successfully"}


@admin_router.get("/products", response_model=ProductListResponse)
async def list_admin_products():
    products = current_domain.repository_for(Product).listing()
    return {"count": len(products), "products": [product_view(p) for p in products]}


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("", response_model=CartSchema)
async def add_to_cart(body: AddToCartRequest, user: User = Depends(current_user)):
    process_for_user(
        user.id,
        AddToCart(user_id=str(user.id), product_id=body.product_id, quantity=body.quantity),
    )
    return cart_view(user.id)


@cart_router.delete("/{item_id}", response_model=CartSchema)
async def remove_from_cart(item_id: str, user: User = Depends(current_user)):
    process_for_user(user.id, RemoveFromCart(user_id=str(user.id), item_id=item_id))
    return cart_view(user.id)


@cart_router.put("/{item_id}/increase", response_model=CartSchema)
async def increase_cart_item(item_id: str, user: User = Depends(current_user)):
    process_for_user(user.id, IncreaseCartItem(user_id=str(user.id), item_id=item_id))
    return cart_view(user.id)


@cart_router.get("", response_model=CartSchema, response_model_exclude_none=True)
async def get_cart(user: User = Depends(current_user)):
    return cart_view(user.id)


# ---------------------------------------------------------------------------
# Address Router
# ---------------------------------------------------------------------------
address_router = APIRouter(prefix="/address", tags=["address"])


@address_router.post("", status_code=201, response_model=AddressSchema)
async def add_address(body: AddAddressRequest, user: User = Depends(current_user)):
    address_id = process_for_user(
        user.id,
        AddAddress(
            user_id=str(user.id),
            street=body.street,
            city=body.city,
            zip_code=body.zip_code,
            country=body.country,
            is_default=body.is_default,
        ),
    )
    return address_view(current_domain.repository_for(Address).get(address_id))


@address_router.get("", response_model=list[AddressSchema])
async def list_addresses(user: User = Depends(current_user)):
    return address_book_view(user.id)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(tags=["orders"])


@order_router.post("/order", status_code=201, response_model=OrderSchema)
async def place_order(body: PlaceOrderRequest, user: User = Depends(current_user)):
    order_id = process_for_user(
        user.id,
        PlaceOrder(user_id=str(user.id), address_id=body.address_id, delivery_type=body.delivery_type),
    )
    return order_view_by_id(order_id)


@order_router.get("/orders", response_model=list[OrderSchema])
async def list_orders(user: User = Depends(current_user)):
    return orders_view(user.id)
