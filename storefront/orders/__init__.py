"""Order processing module: snapshots, checkout, status changes."""
from .snapshot import CustomerInfo, OrderLine, OrderSnapshot, build_order_snapshot
from .serializer import (
    build_cart_payload,
    build_item_payload,
    build_order_item_rows,
    build_order_payload,
    build_order_row,
)
from .checkout import CheckoutService
from .status_service import OrderStatusService, allowed_transitions, filter_orders

__all__ = [
    "CustomerInfo",
    "OrderLine",
    "OrderSnapshot",
    "build_order_snapshot",
    "build_cart_payload",
    "build_item_payload",
    "build_order_item_rows",
    "build_order_payload",
    "build_order_row",
    "CheckoutService",
    "OrderStatusService",
    "allowed_transitions",
    "filter_orders",
]
