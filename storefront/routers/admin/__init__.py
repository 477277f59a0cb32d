"""
Admin API Router

Admin-only endpoints for managing products and orders.
Combines all sub-routers into a single router with tag "admin".
"""
from fastapi import APIRouter

from .products import router as products_router
from .orders import router as orders_router

router = APIRouter(tags=["admin"])

router.include_router(products_router)
router.include_router(orders_router)

__all__ = ["router"]
