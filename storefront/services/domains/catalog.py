"""
Catalog Domain Service

Product reads for the storefront and the hand-off from a catalog entry
to a cart line item. Name, price and image are snapshotted at add time;
the cart never re-queries the catalog afterwards.
"""

from typing import List, Optional

from storefront.cart import LineItem
from storefront.errors import InvalidSizeError, ProductNotFoundError, ProductUnavailableError
from storefront.logging import get_logger
from storefront.services.models import Product
from storefront.services.repositories import ProductRepository

logger = get_logger(__name__)


class CatalogService:
    """Catalog lookups used by browsing views and the cart endpoints."""

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    async def get_product(self, product_id: str) -> Optional[Product]:
        return await self.repo.get_by_id(product_id)

    async def require_product(self, product_id: str) -> Product:
        """Like get_product, but a missing id raises ProductNotFoundError."""
        product = await self.repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError()
        return product

    async def list_products(self, category: Optional[str] = None) -> List[Product]:
        return await self.repo.get_all(active_only=True, category=category)

    async def list_categories(self) -> List[str]:
        return await self.repo.get_categories()

    @staticmethod
    def build_line_item(product: Product, size: str, quantity: int = 1) -> LineItem:
        """
        Turn a catalog entry into a cart candidate.

        Raises:
            ProductUnavailableError: product is deactivated
            InvalidSizeError: size is not one of the product's sizes
        """
        if not product.is_active:
            raise ProductUnavailableError()
        if not size or size not in product.available_sizes:
            logger.info(f"Rejected size {size!r} for product {product.id}")
            raise InvalidSizeError()

        return LineItem(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
            size=size,
            quantity=quantity,
            image_url=product.image_url,
        )
