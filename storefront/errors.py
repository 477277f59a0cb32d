"""
Common Errors

Centralized error messages (to avoid string duplication) and the
exception hierarchy raised by catalog and order flows.
"""

# Cart errors
ERROR_CART_EMPTY = "Cart is empty"
ERROR_CART_SESSION_REQUIRED = "X-Cart-Session header is required"
ERROR_CART_NOT_SAVED = "Cart could not be saved, please retry"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCT_UNAVAILABLE = "Product is not available"
ERROR_INVALID_SIZE = "Selected size is not available for this product"

# Order errors
ERROR_ORDER_NOT_FOUND = "Order not found"
ERROR_ORDER_INVALID_STATUS = "Invalid order status"
ERROR_CHECKOUT_FAILED = "Order could not be submitted"

# Generic errors
ERROR_UNAUTHORIZED = "Admin access required"
ERROR_ADMIN_KEY_NOT_CONFIGURED = "ADMIN_API_KEY not configured"
ERROR_INTERNAL = "Internal server error"


class StorefrontError(Exception):
    """Base class for all storefront errors."""

    default_message = ERROR_INTERNAL

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


# ==================== CART ====================

class CartError(StorefrontError):
    """Raised by flows that consume the cart ledger."""


class EmptyCartError(CartError):
    default_message = ERROR_CART_EMPTY


# ==================== CATALOG ====================

class CatalogError(StorefrontError):
    """Raised when a catalog entry cannot be turned into a line item."""


class ProductNotFoundError(CatalogError):
    default_message = ERROR_PRODUCT_NOT_FOUND


class ProductUnavailableError(CatalogError):
    default_message = ERROR_PRODUCT_UNAVAILABLE


class InvalidSizeError(CatalogError):
    default_message = ERROR_INVALID_SIZE


# ==================== ORDERS ====================

class OrderError(StorefrontError):
    """Raised by order submission and status management."""


class CheckoutError(OrderError):
    default_message = ERROR_CHECKOUT_FAILED


class OrderNotFoundError(OrderError):
    default_message = ERROR_ORDER_NOT_FOUND


class InvalidStatusTransitionError(OrderError):
    default_message = ERROR_ORDER_INVALID_STATUS
