"""Database Models - Pydantic models for catalog and order tables."""
from decimal import Decimal
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import to_decimal as _to_decimal


class OrderStatus(str, Enum):
    """Values stored in orders.status."""
    PENDING = "pendiente"
    CONFIRMED = "confirmado"
    SHIPPED = "enviado"
    DELIVERED = "entregado"
    CANCELLED = "cancelado"


class PaymentMethod(str, Enum):
    CASH = "efectivo"
    TRANSFER = "transferencia"


class Product(BaseModel):
    """Product model."""
    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields from DB

    id: str
    name: str
    description: Optional[str] = None
    price: Decimal
    category: str
    image_url: Optional[str] = None
    available_sizes: list[str] = []
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("available_sizes", mode="before")
    @classmethod
    def default_sizes(cls, v):
        return v or []


class OrderItem(BaseModel):
    """Order item model (one ordered (product, size) row)."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    order_id: Optional[str] = None
    product_id: str
    product_name: str
    product_price: Decimal
    size: str
    quantity: int = 1
    created_at: Optional[datetime] = None

    @field_validator("product_price", mode="before")
    @classmethod
    def convert_item_price_to_decimal(cls, v):
        return _to_decimal(v)


class Order(BaseModel):
    """Order model. `items` is filled from the order_items embed when selected."""
    model_config = ConfigDict(extra="ignore")

    id: str
    user_id: Optional[str] = None
    status: OrderStatus = OrderStatus.PENDING
    payment_method: PaymentMethod
    total: Decimal
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: list[OrderItem] = []

    @field_validator("total", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return _to_decimal(v)

    @classmethod
    def from_row(cls, row: dict) -> "Order":
        """Build from a Supabase row that may embed order_items."""
        data = dict(row)
        data["items"] = data.pop("order_items", None) or []
        return cls(**data)
