"""
Admin Orders Router

Order listing, search and status management.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends

from storefront.auth import verify_admin
from storefront.config import get_store_currency
from storefront.errors import ERROR_ORDER_NOT_FOUND, InvalidStatusTransitionError, OrderNotFoundError
from storefront.orders import allowed_transitions, build_order_payload
from storefront.services.database import get_database
from storefront.services.models import OrderStatus
from .models import UpdateOrderStatusRequest

router = APIRouter(tags=["admin-orders"])


@router.get("/orders")
async def admin_get_orders(
    status: Optional[OrderStatus] = None,
    search: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
    admin=Depends(verify_admin)
):
    """Get orders with optional status filter and customer/id search."""
    db = get_database()
    status_value = status.value if status else None
    if search and search.strip():
        orders = await db.order_status.search_orders(search, status=status_value, limit=limit, offset=offset)
    else:
        orders = await db.orders_repo.get_all(status=status_value, limit=limit, offset=offset)
    currency = get_store_currency()

    formatted = []
    for order in orders:
        payload = build_order_payload(order, currency)
        payload["next_statuses"] = [s.value for s in allowed_transitions(order.status)]
        formatted.append(payload)

    return {"orders": formatted}


@router.get("/orders/{order_id}")
async def admin_get_order(order_id: str, admin=Depends(verify_admin)):
    """Order detail with its line items."""
    db = get_database()
    order = await db.orders_repo.get_by_id(order_id)
    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)

    payload = build_order_payload(order, get_store_currency())
    payload["next_statuses"] = [s.value for s in allowed_transitions(order.status)]
    return payload


@router.patch("/orders/{order_id}/status")
async def admin_update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    admin=Depends(verify_admin)
):
    """Move an order to a new status."""
    db = get_database()
    try:
        await db.order_status.update_status(
            order_id,
            request.status,
            check_transition=not request.force,
        )
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return {"success": True, "order_id": order_id, "status": request.status.value}
