"""
Order Status Management Service

Centralized rules for order status changes made from the admin panel.
"""
from typing import Iterable, List, Optional, Tuple

from storefront.errors import (
    ERROR_ORDER_NOT_FOUND,
    InvalidStatusTransitionError,
    OrderNotFoundError,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Order, OrderStatus
from storefront.services.repositories import OrderRepository

logger = get_logger(__name__)

# Status transition rules
TRANSITIONS = {
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),  # Final state
    OrderStatus.CANCELLED: (),  # Final state
}


def allowed_transitions(status: OrderStatus) -> Tuple[OrderStatus, ...]:
    return TRANSITIONS.get(status, ())


def filter_orders(orders: Iterable[Order], term: Optional[str]) -> List[Order]:
    """Admin search: case-insensitive match on customer name or order id."""
    orders = list(orders)
    if not term:
        return orders
    needle = term.strip().lower()
    return [
        o for o in orders
        if needle in (o.customer_name or "").lower() or needle in o.id.lower()
    ]


class OrderStatusService:
    """Centralized service for order status management."""

    def __init__(self, orders_repo: OrderRepository):
        self.orders_repo = orders_repo

    async def search_orders(
        self,
        term: str,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Order]:
        """
        Admin search over every order, paged after matching.

        ilike does not work on uuid columns in PostgREST, so the id match
        runs here instead of in the query.
        """
        orders = await self.orders_repo.get_all(status=status, limit=None)
        matches = filter_orders(orders, term)
        return matches[offset:offset + limit]

    async def get_order_status(self, order_id: str) -> Optional[OrderStatus]:
        status = await self.orders_repo.get_status(order_id)
        return OrderStatus(status) if status else None

    async def can_transition_to(self, order_id: str, target_status: OrderStatus) -> tuple[bool, Optional[str]]:
        """
        Check if order can transition to target status.

        Returns:
            (can_transition, reason_if_not)
        """
        current_status = await self.get_order_status(order_id)
        if current_status is None:
            return False, ERROR_ORDER_NOT_FOUND

        allowed = allowed_transitions(current_status)
        if target_status not in allowed:
            allowed_values = [s.value for s in allowed]
            return False, (
                f"Cannot transition from '{current_status.value}' to "
                f"'{target_status.value}'. Allowed: {allowed_values}"
            )
        return True, None

    async def update_status(
        self,
        order_id: str,
        new_status: OrderStatus,
        check_transition: bool = True,
    ) -> None:
        """
        Update order status.

        Args:
            order_id: Order ID
            new_status: Target status
            check_transition: Whether to validate transition rules

        Raises:
            OrderNotFoundError: no such order
            InvalidStatusTransitionError: transition not allowed
        """
        new_status = OrderStatus(new_status)
        safe_id = sanitize_id_for_logging(order_id)

        if check_transition:
            ok, reason = await self.can_transition_to(order_id, new_status)
            if not ok and reason == ERROR_ORDER_NOT_FOUND:
                raise OrderNotFoundError()
            if not ok:
                logger.warning(f"Cannot update order {safe_id} status: {reason}")
                raise InvalidStatusTransitionError(reason)

        updated = await self.orders_repo.update_status(order_id, new_status)
        if not updated:
            logger.warning(f"No rows updated for order {safe_id}")
            raise OrderNotFoundError()

        logger.info(f"Order {safe_id} status -> {new_status.value}")
