"""Storefront configuration read from the environment.

Values are read on every call so tests can patch os.environ.
"""
import os

from storefront.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CART_TTL_SECONDS = 2592000  # 30 days
DEFAULT_CURRENCY = "GTQ"


def get_admin_api_key() -> str:
    return os.environ.get("ADMIN_API_KEY", "")


def get_store_currency() -> str:
    return os.environ.get("STORE_CURRENCY", DEFAULT_CURRENCY).upper()


def get_cart_ttl_seconds() -> int:
    """Lifetime of a persisted cart, refreshed on every save."""
    raw = os.environ.get("CART_TTL_SECONDS")
    if not raw:
        return DEFAULT_CART_TTL_SECONDS
    try:
        ttl = int(raw)
    except ValueError:
        logger.warning(f"Invalid CART_TTL_SECONDS={raw!r}, using default")
        return DEFAULT_CART_TTL_SECONDS
    return ttl if ttl > 0 else DEFAULT_CART_TTL_SECONDS