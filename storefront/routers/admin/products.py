"""
Admin Products Router

Product management endpoints. Deleting a product only deactivates it so
existing orders keep their references.
"""
from fastapi import APIRouter, HTTPException, Depends

from storefront.auth import verify_admin
from storefront.config import get_store_currency
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.logging import get_logger
from storefront.routers.webapp.products import format_product
from storefront.services.database import get_database
from storefront.services.models import Product
from storefront.services.money import to_db_amount
from .models import CreateProductRequest, UpdateProductRequest

logger = get_logger(__name__)

router = APIRouter(tags=["admin-products"])


def _admin_product(product: Product) -> dict:
    payload = format_product(product, get_store_currency())
    payload["is_active"] = product.is_active
    payload["created_at"] = product.created_at.isoformat() if product.created_at else None
    return payload


@router.get("/products")
async def admin_get_products(admin=Depends(verify_admin)):
    """Get all products for admin (including inactive)."""
    db = get_database()
    products = await db.products_repo.get_all(active_only=False)
    return {"products": [_admin_product(p) for p in products]}


@router.post("/products", status_code=201)
async def admin_create_product(request: CreateProductRequest, admin=Depends(verify_admin)):
    """Create a new product."""
    db = get_database()
    data = request.model_dump()
    data["price"] = to_db_amount(request.price)
    data["is_active"] = True

    product = await db.products_repo.create(data)
    logger.info(f"Product created: {product.id}")
    return {"success": True, "product": _admin_product(product)}


@router.patch("/products/{product_id}")
async def admin_update_product(product_id: str, request: UpdateProductRequest, admin=Depends(verify_admin)):
    """Update product fields that were sent."""
    data = request.model_dump(exclude_unset=True)
    if not data:
        raise HTTPException(status_code=400, detail="No fields to update")
    if data.get("price") is not None:
        data["price"] = to_db_amount(data["price"])

    db = get_database()
    product = await db.products_repo.update(product_id, data)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True, "product": _admin_product(product)}


@router.delete("/products/{product_id}")
async def admin_delete_product(product_id: str, admin=Depends(verify_admin)):
    """Soft delete: hide product from the storefront."""
    db = get_database()
    if not await db.products_repo.deactivate(product_id):
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    logger.info(f"Product deactivated: {product_id}")
    return {"success": True}
