"""WebApp API Router.

Storefront endpoints: catalog, cart, checkout.
Combines all sub-routers into a single router with prefix /api/webapp.
"""

from fastapi import APIRouter

from .cart import router as cart_router
from .orders import router as orders_router
from .products import router as products_router

router = APIRouter(prefix="/api/webapp", tags=["webapp"])

router.include_router(products_router)
router.include_router(cart_router)
router.include_router(orders_router)

__all__ = ["router"]
