"""Pydantic request/response schemas for the Storefront API.

These are external contracts, separate from the internal Protean commands.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
class RegisterRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"name": "Jane Doe", "email": "jane@example.com", "password": "secret1"}]},
    )

    name: str = Field(..., min_length=2, max_length=50)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(CamelModel):
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class RefreshTokenRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1)


class UserSchema(CamelModel):
    id: str
    name: str
    email: str
    role: str
    status: str
    registered_at: datetime | None = None
    last_login_at: datetime | None = None


class AuthData(CamelModel):
    user: UserSchema | None = None
    token: str
    refresh_token: str


class AuthResponse(CamelModel):
    success: bool = True
    message: str
    data: AuthData


class AdminLoginResponse(CamelModel):
    message: str = "Admin login successful"
    access_token: str
    refresh_token: str
    user: UserSchema


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class AddProductRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Espresso Cup",
                    "description": "Porcelain, 90 ml",
                    "price": 12.5,
                    "category": "Kitchen",
                    "stock": 40,
                }
            ]
        },
    )

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., ge=0)
    image: str | None = Field(None, max_length=1000)
    category: str | None = Field(None, max_length=100)
    stock: int | None = Field(None, ge=0)


class ProductSchema(CamelModel):
    id: str
    name: str
    description: str = ""
    price: float
    price_cents: int
    image: str = ""
    category: str
    stock: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductCreatedResponse(CamelModel):
    message: str = "Product created successfully"
    product: ProductSchema


class ProductListResponse(CamelModel):
    count: int
    products: list[ProductSchema]


class MessageResponse(CamelModel):
    message: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)


class CartLineSchema(CamelModel):
    id: str
    product_id: str
    product: ProductSchema | None = None
    quantity: int


class CartSchema(CamelModel):
    id: str | None = None
    user_id: str | None = None
    items: list[CartLineSchema] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Address book
# ---------------------------------------------------------------------------
class AddAddressRequest(CamelModel):
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)
    is_default: bool = False


class AddressSchema(CamelModel):
    id: str
    user_id: str
    street: str
    city: str
    zip_code: str
    country: str
    is_default: bool
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(CamelModel):
    address_id: str = Field(..., min_length=1)
    delivery_type: Literal["standard", "express", "overnight"] = "standard"


class OrderLineSchema(CamelModel):
    id: str
    product_id: str
    product: ProductSchema | None = None
    quantity: int
    price: float
    price_cents: int


class OrderSchema(CamelModel):
    id: str
    user_id: str
    items: list[OrderLineSchema]
    total_amount: float
    total_amount_cents: int
    delivery_type: str
    address_id: str
    address: AddressSchema | None = None
    status: str
    verification_artifact: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
