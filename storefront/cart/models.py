"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from storefront.services.money import to_decimal, multiply

MIN_QUANTITY = 1


class LedgerState(str, Enum):
    EMPTY = "empty"
    NON_EMPTY = "non_empty"


@dataclass
class LineItem:
    """One (product, size) selection with a locked-in unit price."""
    product_id: str
    product_name: str
    unit_price: Decimal
    size: str
    quantity: int = 1
    image_url: Optional[str] = None

    def __post_init__(self):
        self.unit_price = to_decimal(self.unit_price)
        self.quantity = int(self.quantity)

    @property
    def key(self) -> Tuple[str, str]:
        """Identity of the row inside a ledger."""
        return (self.product_id, self.size)

    @property
    def line_total(self) -> Decimal:
        """Exact price for all units (no rounding)."""
        return multiply(self.unit_price, self.quantity)

    def copy(self) -> "LineItem":
        return LineItem(
            product_id=self.product_id,
            product_name=self.product_name,
            unit_price=self.unit_price,
            size=self.size,
            quantity=self.quantity,
            image_url=self.image_url,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary. Prices are kept as strings."""
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "unit_price": str(self.unit_price),
            "size": self.size,
            "quantity": self.quantity,
            "image_url": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        """
        Create from a persisted row.

        Stricter than the constructor: an unparseable or non-finite price and a
        quantity below 1 raise instead of being coerced.
        """
        unit_price = Decimal(str(data["unit_price"]))
        if not unit_price.is_finite() or unit_price < 0:
            raise ValueError(f"Invalid unit_price {data['unit_price']!r}")
        quantity = int(data["quantity"])
        if quantity < MIN_QUANTITY:
            raise ValueError(f"Invalid quantity {quantity}")

        return cls(
            product_id=data["product_id"],
            product_name=data["product_name"],
            unit_price=unit_price,
            size=data["size"],
            quantity=quantity,
            image_url=data.get("image_url"),
        )
