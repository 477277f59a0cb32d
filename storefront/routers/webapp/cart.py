"""
WebApp Cart Router

Shopping cart endpoints. The cart lives in the session's ledger; the
catalog is only consulted when a new item is added.

The ledger is rebuilt on every request, so a save that still fails after
one retry is reported as 503: the change did not reach storage and the
next request would not see it.
"""
import asyncio

from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import CartLedger
from storefront.config import get_store_currency
from storefront.errors import ERROR_CART_NOT_SAVED, CatalogError, ProductNotFoundError
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.orders import build_cart_payload
from storefront.routers.deps import get_cart_ledger, get_cart_session
from storefront.services.database import get_database
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["webapp-cart"])


def _cart_response(ledger: CartLedger) -> dict:
    return build_cart_payload(ledger, get_store_currency())


async def _commit(ledger: CartLedger, session_id: str) -> dict:
    """Make sure the mutation reached storage, then render the cart."""
    if not await asyncio.to_thread(ledger.flush):
        logger.error(f"Cart for session {sanitize_id_for_logging(session_id)} could not be saved")
        raise HTTPException(status_code=503, detail=ERROR_CART_NOT_SAVED)
    return _cart_response(ledger)


@router.get("/cart")
async def get_webapp_cart(ledger: CartLedger = Depends(get_cart_ledger)):
    """Get the session's cart with totals."""
    return _cart_response(ledger)


@router.post("/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    ledger: CartLedger = Depends(get_cart_ledger),
    session_id: str = Depends(get_cart_session),
):
    """Add a (product, size) to the cart, merging with an existing row."""
    db = get_database()
    try:
        product = await db.catalog.require_product(request.product_id)
        candidate = db.catalog.build_line_item(product, request.size, request.quantity)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))

    await asyncio.to_thread(ledger.add_item, candidate)
    return await _commit(ledger, session_id)


@router.patch("/cart/item")
async def update_cart_item(
    request: UpdateCartItemRequest,
    ledger: CartLedger = Depends(get_cart_ledger),
    session_id: str = Depends(get_cart_session),
):
    """Update a row's quantity (values below 1 become 1)."""
    await asyncio.to_thread(ledger.update_quantity, request.product_id, request.size, request.quantity)
    return await _commit(ledger, session_id)


@router.delete("/cart/item")
async def remove_cart_item(
    product_id: str,
    size: str,
    ledger: CartLedger = Depends(get_cart_ledger),
    session_id: str = Depends(get_cart_session),
):
    """Remove a row from the cart."""
    await asyncio.to_thread(ledger.remove_item, product_id, size)
    return await _commit(ledger, session_id)


@router.delete("/cart")
async def clear_cart(
    ledger: CartLedger = Depends(get_cart_ledger),
    session_id: str = Depends(get_cart_session),
):
    """Empty the cart."""
    await asyncio.to_thread(ledger.clear)
    return await _commit(ledger, session_id)
