"""
Supabase Database Service

Provides the Database class that wires repositories and domain services
around one async Supabase client.

Usage:
    from storefront.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    db = get_database()
    product = await db.catalog.get_product("...")
"""

import asyncio
from typing import Optional

from supabase._async.client import AsyncClient

from storefront.db import get_supabase
from storefront.logging import get_logger
from storefront.orders.checkout import CheckoutService
from storefront.orders.status_service import OrderStatusService
from storefront.services.domains import CatalogService
from storefront.services.repositories import OrderRepository, ProductRepository

logger = get_logger(__name__)


class Database:
    """
    Supabase-backed collaborators of the storefront.

    Must be initialized via `create()` or `init_database()` in async code;
    tests construct it directly with a mocked client.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

        self.products_repo = ProductRepository(self.client)
        self.orders_repo = OrderRepository(self.client)

        self.catalog = CatalogService(self.products_repo)
        self.checkout = CheckoutService(self.orders_repo)
        self.order_status = OrderStatusService(self.orders_repo)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory method: creates the Supabase client and repositories."""
        client = await get_supabase()
        return cls(client)


# Singleton instance (initialized at startup via init_database())
_db: Database | None = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    """Get or create async lock for initialization."""
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize async database singleton.

    Returns:
        Database instance (also cached as singleton)
    """
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        # Double-check after acquiring lock
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized successfully")
    return _db


async def close_database() -> None:
    """Drop the singleton. Called at FastAPI shutdown."""
    global _db
    if _db is not None:
        _db = None
        logger.info("Supabase client released")


def get_database() -> Database:
    """Get database instance (sync accessor).

    Raises:
        RuntimeError: If init_database() has not run
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Call 'await init_database()' at startup."
        )
    return _db
