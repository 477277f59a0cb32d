"""
WebApp API Pydantic Models

Shared models for all webapp endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field

from storefront.services.models import PaymentMethod


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    size: str
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(BaseModel):
    product_id: str
    size: str
    quantity: int  # values below 1 are clamped to 1


# ==================== CHECKOUT MODELS ====================

class CheckoutRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str = Field(min_length=1)
    address: str = Field(min_length=1)
    payment_method: PaymentMethod = PaymentMethod.CASH
    user_id: Optional[str] = None
