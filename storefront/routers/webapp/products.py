"""
WebApp Catalog Router

Public product listing for the storefront (active products only).
"""
from typing import Optional

from fastapi import APIRouter, HTTPException

from storefront.config import get_store_currency
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.services.database import get_database
from storefront.services.models import Product
from storefront.services.money import format_money, to_float

router = APIRouter(tags=["webapp-products"])


def format_product(product: Product, currency: str) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description or "",
        "category": product.category,
        "price": to_float(product.price),
        "price_display": format_money(product.price, currency),
        "image_url": product.image_url,
        "available_sizes": product.available_sizes,
    }


@router.get("/products")
async def get_products(category: Optional[str] = None):
    """List active products, optionally filtered by category."""
    db = get_database()
    products = await db.catalog.list_products(category=category)
    currency = get_store_currency()
    return {"products": [format_product(p, currency) for p in products]}


@router.get("/products/{product_id}")
async def get_product(product_id: str):
    """Get one active product."""
    db = get_database()
    product = await db.catalog.get_product(product_id)
    if not product or not product.is_active:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return format_product(product, get_store_currency())


@router.get("/categories")
async def get_categories():
    """Distinct categories for the catalog filter bar."""
    db = get_database()
    return {"categories": await db.catalog.list_categories()}
