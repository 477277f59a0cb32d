"""Order/cart row builders and API response serializers."""
from typing import Dict, Any, List

from storefront.cart import CartLedger, LineItem
from storefront.services.models import Order, OrderItem, OrderStatus
from storefront.services.money import format_money, to_db_amount, to_float
from .snapshot import OrderSnapshot


# ==================== DATABASE ROWS ====================

def build_order_row(snapshot: OrderSnapshot) -> Dict[str, Any]:
    """orders insert payload for a snapshot."""
    row = {
        "status": OrderStatus.PENDING.value,
        "payment_method": snapshot.payment_method.value,
        "total": to_db_amount(snapshot.total),
        "customer_name": snapshot.customer.name,
        "customer_email": snapshot.customer.email,
        "customer_phone": snapshot.customer.phone,
        "customer_address": snapshot.customer.address,
    }
    if snapshot.user_id:
        row["user_id"] = snapshot.user_id
    return row


def build_order_item_rows(order_id: str, snapshot: OrderSnapshot) -> List[Dict[str, Any]]:
    """order_items insert payload, one row per (product, size)."""
    return [
        {
            "order_id": order_id,
            "product_id": line.product_id,
            "product_name": line.product_name,
            "product_price": to_db_amount(line.unit_price),
            "size": line.size,
            "quantity": line.quantity,
        }
        for line in snapshot.items
    ]


# ==================== API PAYLOADS ====================

def build_item_payload(item: OrderItem, currency: str) -> Dict[str, Any]:
    line_total = item.product_price * item.quantity
    return {
        "id": item.id,
        "product_id": item.product_id,
        "product_name": item.product_name,
        "size": item.size,
        "quantity": item.quantity,
        "product_price": to_float(item.product_price),
        "line_total": to_float(line_total),
        "line_total_display": format_money(line_total, currency),
    }


def build_order_payload(order: Order, currency: str) -> Dict[str, Any]:
    return {
        "id": order.id,
        "short_id": order.id[:8],
        "user_id": order.user_id,
        "status": order.status.value,
        "payment_method": order.payment_method.value,
        "total": to_float(order.total),
        "total_display": format_money(order.total, currency),
        "customer": {
            "name": order.customer_name,
            "email": order.customer_email,
            "phone": order.customer_phone,
            "address": order.customer_address,
        },
        "items": [build_item_payload(item, currency) for item in order.items],
        "created_at": order.created_at.isoformat() if order.created_at else None,
    }


def _line_payload(item: LineItem, currency: str) -> Dict[str, Any]:
    return {
        "product_id": item.product_id,
        "product_name": item.product_name,
        "size": item.size,
        "quantity": item.quantity,
        "image_url": item.image_url,
        "unit_price": to_float(item.unit_price),
        "line_total": to_float(item.line_total),
        "line_total_display": format_money(item.line_total, currency),
    }


def build_cart_payload(ledger: CartLedger, currency: str) -> Dict[str, Any]:
    """Cart response: rows in insertion order plus the aggregates."""
    total = ledger.get_total()
    return {
        "items": [_line_payload(item, currency) for item in ledger.items],
        "item_count": ledger.get_item_count(),
        "total": to_float(total),
        "total_display": format_money(total, currency),
        "currency": currency,
        "is_empty": ledger.is_empty,
    }
