"""Storefront error taxonomy.

Each error carries the HTTP status and machine-readable code it surfaces as.
Invariant violations inside aggregates keep raising Protean's
``ValidationError``; these classes cover lookups, ownership, authentication
and the order workflow.
"""


class StorefrontError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    code = "INTERNAL_ERROR"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, errors: list | dict | None = None) -> None:
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# 404
# ---------------------------------------------------------------------------
class NotFound(StorefrontError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"


class CartNotFound(NotFound):
    code = "CART_NOT_FOUND"
    default_message = "Cart not found"


class CartItemNotFound(NotFound):
    code = "ITEM_NOT_FOUND"
    default_message = "Item not found"


class ProductNotFound(NotFound):
    code = "PRODUCT_NOT_FOUND"
    default_message = "Product not found"


class AddressNotFound(NotFound):
    code = "ADDRESS_NOT_FOUND"
    default_message = "Address not found"


class UserNotFound(NotFound):
    code = "USER_NOT_FOUND"
    default_message = "User not found"


# ---------------------------------------------------------------------------
# 400
# ---------------------------------------------------------------------------
class EmptyCart(StorefrontError):
    status_code = 400
    code = "EMPTY_CART"
    default_message = "Cart is empty"


# ---------------------------------------------------------------------------
# 401
# ---------------------------------------------------------------------------
class Unauthorized(StorefrontError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class MissingToken(Unauthorized):
    code = "MISSING_TOKEN"
    default_message = "Authorization token missing"


class InvalidToken(Unauthorized):
    code = "INVALID_TOKEN"
    default_message = "Invalid token"


class TokenExpired(Unauthorized):
    code = "TOKEN_EXPIRED"
    default_message = "Token has expired"


class InvalidCredentials(Unauthorized):
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


# ---------------------------------------------------------------------------
# 403
# ---------------------------------------------------------------------------
class Forbidden(StorefrontError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "Forbidden"


class AddressForbidden(Forbidden):
    code = "ADDRESS_FORBIDDEN"
    default_message = "Address does not belong to the current user"


class AccountInactive(Forbidden):
    code = "ACCOUNT_INACTIVE"
    default_message = "Account is not active"


class AdminRequired(Forbidden):
    code = "ADMIN_REQUIRED"
    default_message = "Admin access required"


# ---------------------------------------------------------------------------
# 409
# ---------------------------------------------------------------------------
class Conflict(StorefrontError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Conflict"


class EmailInUse(Conflict):
    code = "EMAIL_IN_USE"
    default_message = "Email already in use"


class ProductUnavailable(Conflict):
    code = "PRODUCT_UNAVAILABLE"
    default_message = "A product in the cart is no longer available"


class ConcurrentUpdate(Conflict):
    code = "CONCURRENT_UPDATE"
    default_message = "The resource was modified concurrently, retry the request"


# ---------------------------------------------------------------------------
# 500
# ---------------------------------------------------------------------------
class ExternalFailure(StorefrontError):
    status_code = 500
    code = "EXTERNAL_FAILURE"
    default_message = "External service failure"


class ArtifactGenerationFailed(ExternalFailure):
    code = "ARTIFACT_GENERATION_FAILED"
    default_message = "Failed to generate order verification artifact"
