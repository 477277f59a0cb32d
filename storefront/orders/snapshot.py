"""Order snapshot: immutable copy of the cart handed to order submission."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Tuple

from storefront.cart import CartLedger, LineItem
from storefront.errors import EmptyCartError
from storefront.services.models import PaymentMethod
from storefront.services.money import multiply


@dataclass(frozen=True)
class CustomerInfo:
    """Contact and shipping fields collected at checkout."""
    name: str
    email: str
    phone: str
    address: str


@dataclass(frozen=True)
class OrderLine:
    """Frozen copy of a LineItem."""
    product_id: str
    product_name: str
    unit_price: Decimal
    size: str
    quantity: int
    image_url: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return multiply(self.unit_price, self.quantity)

    @classmethod
    def from_line_item(cls, item: LineItem) -> "OrderLine":
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            unit_price=item.unit_price,
            size=item.size,
            quantity=item.quantity,
            image_url=item.image_url,
        )


@dataclass(frozen=True)
class OrderSnapshot:
    items: Tuple[OrderLine, ...]
    customer: CustomerInfo
    payment_method: PaymentMethod
    total: Decimal
    user_id: Optional[str] = None
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.items)


def build_order_snapshot(
    ledger: CartLedger,
    customer: CustomerInfo,
    payment_method: PaymentMethod,
    user_id: Optional[str] = None,
) -> OrderSnapshot:
    """
    Freeze the current cart contents for submission.

    Raises:
        EmptyCartError: the ledger has no line items
    """
    if ledger.is_empty:
        raise EmptyCartError()

    return OrderSnapshot(
        items=tuple(OrderLine.from_line_item(item) for item in ledger.items),
        customer=customer,
        payment_method=PaymentMethod(payment_method),
        total=ledger.get_total(),
        user_id=user_id,
    )
