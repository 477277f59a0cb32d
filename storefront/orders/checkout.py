"""
Checkout Service

Submits a cart snapshot as an order (orders row + order_items rows) and
clears the cart only after the submission succeeded. Any failure leaves
the cart untouched so the shopper can retry.
"""
import asyncio
from typing import Optional

from storefront.cart import CartLedger
from storefront.errors import CheckoutError
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Order, PaymentMethod
from storefront.services.repositories import OrderRepository
from .serializer import build_order_item_rows, build_order_row
from .snapshot import CustomerInfo, OrderSnapshot, build_order_snapshot

logger = get_logger(__name__)


class CheckoutService:
    """Order submission collaborator of the cart ledger."""

    def __init__(self, orders_repo: OrderRepository):
        self.orders_repo = orders_repo

    async def submit(self, snapshot: OrderSnapshot) -> Order:
        """
        Write the snapshot to the orders tables.

        Raises:
            CheckoutError: either insert failed (a half-written order is removed)
        """
        try:
            order_row = await self.orders_repo.create(build_order_row(snapshot))
        except Exception as e:
            logger.error(f"Failed to create order: {e}", exc_info=True)
            raise CheckoutError() from e

        order_id = order_row["id"]
        try:
            item_rows = await self.orders_repo.create_items(build_order_item_rows(order_id, snapshot))
        except Exception as e:
            logger.error(
                f"Failed to create items for order {sanitize_id_for_logging(order_id)}: {e}",
                exc_info=True,
            )
            await self._discard_order(order_id)
            raise CheckoutError() from e

        return Order.from_row({**order_row, "order_items": item_rows})

    async def checkout(
        self,
        ledger: CartLedger,
        customer: CustomerInfo,
        payment_method: PaymentMethod,
        user_id: Optional[str] = None,
    ) -> Order:
        """Snapshot the cart, submit it, then clear the cart."""
        snapshot = build_order_snapshot(ledger, customer, payment_method, user_id=user_id)
        order = await self.submit(snapshot)

        await asyncio.to_thread(ledger.clear)
        logger.info(
            f"Order {sanitize_id_for_logging(order.id)} created: "
            f"{snapshot.item_count} units, total={snapshot.total}"
        )
        return order

    async def _discard_order(self, order_id: str) -> None:
        try:
            await self.orders_repo.delete(order_id)
        except Exception as e:
            logger.error(
                f"Failed to remove orphan order {sanitize_id_for_logging(order_id)}: {e}",
                exc_info=True,
            )
