"""Product Repository - Product catalog operations."""
from typing import Optional, List, Dict, Any
from .base import BaseRepository
from storefront.services.models import Product


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def get_all(self, active_only: bool = True, category: Optional[str] = None) -> List[Product]:
        """Get products, newest first."""
        query = self.client.table("products").select("*")
        if active_only:
            query = query.eq("is_active", True)
        if category:
            query = query.eq("category", category)

        result = await query.order("created_at", desc=True).execute()
        return [Product(**p) for p in result.data or []]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table("products").select("*").eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def get_categories(self) -> List[str]:
        """Distinct categories of active products."""
        result = await self.client.table("products").select("category").eq("is_active", True).execute()
        return sorted({row["category"] for row in result.data or [] if row.get("category")})

    async def create(self, data: Dict[str, Any]) -> Product:
        """Create new product."""
        result = await self.client.table("products").insert(data).execute()
        return Product(**result.data[0])

    async def update(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        """Update product."""
        result = await self.client.table("products").update(data).eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def deactivate(self, product_id: str) -> bool:
        """Soft delete: hide the product from the storefront."""
        result = await self.client.table("products").update({"is_active": False}).eq("id", product_id).execute()
        return bool(result.data)
