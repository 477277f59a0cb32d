"""
Admin API Pydantic Models

Shared models for all admin endpoints.
"""
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field

from storefront.services.models import OrderStatus


# ==================== PRODUCT MODELS ====================

class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    price: Decimal = Field(gt=0)
    category: str = Field(min_length=1)
    available_sizes: List[str] = Field(min_length=1)
    image_url: Optional[str] = None


class UpdateProductRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, gt=0)
    category: Optional[str] = Field(default=None, min_length=1)
    available_sizes: Optional[List[str]] = Field(default=None, min_length=1)
    image_url: Optional[str] = None
    is_active: Optional[bool] = None


# ==================== ORDER MODELS ====================

class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus
    force: bool = False  # skip transition rules
