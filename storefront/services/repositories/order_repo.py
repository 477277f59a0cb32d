"""Order Repository - Order operations."""
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from .base import BaseRepository
from storefront.services.models import Order, OrderStatus

# Orders are always read together with their line rows
ORDER_WITH_ITEMS = "*, order_items(*)"


class OrderRepository(BaseRepository):
    """Order database operations."""

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert an orders row and return it."""
        result = await self.client.table("orders").insert(data).execute()
        return result.data[0]

    async def create_items(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert order_items rows in one request."""
        result = await self.client.table("order_items").insert(items).execute()
        return result.data or []

    async def delete(self, order_id: str) -> None:
        """Delete an order row (used to roll back a half-written checkout)."""
        await self.client.table("orders").delete().eq("id", order_id).execute()

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """Get order by ID."""
        result = await self.client.table("orders").select(ORDER_WITH_ITEMS).eq("id", order_id).execute()
        return Order.from_row(result.data[0]) if result.data else None

    async def get_by_user(self, user_id: str, limit: int = 20, offset: int = 0) -> List[Order]:
        """Get user's orders, newest first."""
        result = await (
            self.client.table("orders")
            .select(ORDER_WITH_ITEMS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [Order.from_row(o) for o in result.data or []]

    async def get_all(
        self, status: Optional[str] = None, limit: Optional[int] = 50, offset: int = 0
    ) -> List[Order]:
        """Get orders for the admin panel, newest first. limit=None returns every row."""
        query = self.client.table("orders").select(ORDER_WITH_ITEMS)
        if status:
            query = query.eq("status", status)

        query = query.order("created_at", desc=True)
        if limit is not None:
            query = query.range(offset, offset + limit - 1)

        result = await query.execute()
        return [Order.from_row(o) for o in result.data or []]

    async def get_status(self, order_id: str) -> Optional[str]:
        result = await self.client.table("orders").select("status").eq("id", order_id).execute()
        return result.data[0].get("status") if result.data else None

    async def update_status(self, order_id: str, status: OrderStatus) -> bool:
        """Update order status. Returns False when no row matched."""
        data = {
            "status": status.value,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = await self.client.table("orders").update(data).eq("id", order_id).execute()
        return bool(result.data)
