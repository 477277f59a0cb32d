"""
Shared Dependencies for Routers

The cart ledger is opened per request from the session's Redis key.
Tests override get_cart_ledger through app.dependency_overrides.
"""

from fastapi import Depends, Header, HTTPException

from storefront.cart import CartLedger, RedisCartStorage
from storefront.errors import ERROR_CART_SESSION_REQUIRED


def get_cart_session(
    x_cart_session: str = Header(None, alias="X-Cart-Session")
) -> str:
    """Device/session identifier that scopes the persisted cart."""
    session_id = (x_cart_session or "").strip()
    if not session_id:
        raise HTTPException(status_code=400, detail=ERROR_CART_SESSION_REQUIRED)
    return session_id


def get_cart_ledger(session_id: str = Depends(get_cart_session)) -> CartLedger:
    """Load the session's ledger (sync dependency, runs in the threadpool)."""
    return CartLedger(RedisCartStorage(session_id))
