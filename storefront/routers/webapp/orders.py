"""
WebApp Orders Router

Checkout and customer order history.
"""
import asyncio

from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import CartLedger
from storefront.config import get_store_currency
from storefront.errors import CheckoutError, EmptyCartError
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.orders import CustomerInfo, build_order_payload
from storefront.routers.deps import get_cart_ledger
from storefront.services.database import get_database
from .models import CheckoutRequest

logger = get_logger(__name__)

router = APIRouter(tags=["webapp-orders"])


@router.post("/checkout", status_code=201)
async def checkout(request: CheckoutRequest, ledger: CartLedger = Depends(get_cart_ledger)):
    """
    Submit the cart as an order. The cart is cleared only on success.

    `cart_cleared` is false when the order exists but the emptied cart could
    not be saved; clients must drop their cart view instead of resubmitting.
    """
    db = get_database()
    customer = CustomerInfo(
        name=request.name.strip(),
        email=request.email.strip(),
        phone=request.phone.strip(),
        address=request.address.strip(),
    )

    try:
        order = await db.checkout.checkout(
            ledger,
            customer,
            request.payment_method,
            user_id=request.user_id,
        )
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CheckoutError as e:
        logger.warning(
            f"Checkout failed for {sanitize_string_for_logging(customer.name)}, cart kept for retry"
        )
        raise HTTPException(status_code=502, detail=str(e))

    payload = build_order_payload(order, get_store_currency())
    payload["cart_cleared"] = await asyncio.to_thread(ledger.flush)
    if not payload["cart_cleared"]:
        logger.error(
            f"Order {sanitize_id_for_logging(order.id)} created but the cart could not be cleared"
        )
    return payload


@router.get("/orders")
async def get_my_orders(user_id: str, limit: int = 20, offset: int = 0):
    """Customer order history, newest first."""
    db = get_database()
    orders = await db.orders_repo.get_by_user(user_id, limit=limit, offset=offset)
    currency = get_store_currency()
    return {"orders": [build_order_payload(o, currency) for o in orders]}
