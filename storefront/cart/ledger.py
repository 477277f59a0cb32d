"""
Cart Ledger

Authoritative, locally persisted set of line items a shopper intends to buy.

Rules:
- (product_id, size) is unique; adding an existing pair merges quantities
- quantities are always >= 1 (update_quantity clamps, removal is explicit)
- totals use Decimal arithmetic only
- state is saved after every mutation; a failed save never undoes the
  in-memory change and is retried by the next mutation or flush()
"""
from decimal import Decimal, InvalidOperation
from typing import Iterator, List, Optional, Tuple

from storefront.logging import get_logger
from storefront.services.money import sum_money
from .models import MIN_QUANTITY, LedgerState, LineItem
from .storage import CartStorage, MemoryCartStorage

logger = get_logger(__name__)


class CartLedger:
    """Owns the cart line items of one device/session."""

    def __init__(self, storage: Optional[CartStorage] = None):
        self.storage = storage if storage is not None else MemoryCartStorage()
        self.needs_flush = False
        self._items: List[LineItem] = self._load()

    # ==================== READS ====================

    @property
    def items(self) -> Tuple[LineItem, ...]:
        """Read snapshot of the line items (copies, insertion order)."""
        return tuple(item.copy() for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def state(self) -> LedgerState:
        return LedgerState.EMPTY if self.is_empty else LedgerState.NON_EMPTY

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def get_item(self, product_id: str, size: str) -> Optional[LineItem]:
        item = self._find(product_id, size)
        return item.copy() if item else None

    def get_total(self) -> Decimal:
        """Sum of unit_price * quantity over all line items (exact)."""
        return sum_money(item.line_total for item in self._items)

    def get_item_count(self) -> int:
        """Total units in the cart (badge count, not row count)."""
        return sum(item.quantity for item in self._items)

    # ==================== MUTATIONS ====================

    def add_item(self, candidate: LineItem) -> None:
        """Append the candidate or merge its quantity into the matching row."""
        existing = self._find(candidate.product_id, candidate.size)
        if existing:
            existing.quantity += candidate.quantity
        else:
            self._items.append(candidate.copy())
        self._persist()

    def update_quantity(self, product_id: str, size: str, new_quantity: int) -> None:
        """Set the quantity of a row; values below 1 are clamped to 1."""
        existing = self._find(product_id, size)
        if existing is None:
            return
        existing.quantity = max(MIN_QUANTITY, int(new_quantity))
        self._persist()

    def remove_item(self, product_id: str, size: str) -> None:
        """Delete the matching row, if any."""
        remaining = [item for item in self._items if item.key != (product_id, size)]
        if len(remaining) == len(self._items):
            return
        self._items = remaining
        self._persist()

    def clear(self) -> None:
        """Empty the ledger (after checkout or an explicit 'empty cart')."""
        self._items = []
        self._persist()

    def flush(self) -> bool:
        """Retry a failed save. Returns True when storage is in sync."""
        if self.needs_flush:
            self._persist()
        return not self.needs_flush

    # ==================== SERIALIZATION ====================

    def to_dict(self) -> dict:
        return {"items": [item.to_dict() for item in self._items]}

    # ==================== INTERNALS ====================

    def _find(self, product_id: str, size: str) -> Optional[LineItem]:
        return next(
            (item for item in self._items if item.key == (product_id, size)),
            None,
        )

    def _load(self) -> List[LineItem]:
        try:
            data = self.storage.load()
        except Exception as e:
            logger.warning(f"Failed to load cart, starting empty: {e}", exc_info=True)
            return []

        if not data:
            return []

        try:
            return self._merge_rows(LineItem.from_dict(row) for row in data.get("items", []))
        except (KeyError, TypeError, ValueError, AttributeError, InvalidOperation) as e:
            logger.warning(f"Corrupted cart data, starting empty: {e}")
            return []

    @staticmethod
    def _merge_rows(rows) -> List[LineItem]:
        """Rebuild rows from storage, re-applying the uniqueness rule."""
        merged: List[LineItem] = []
        for row in rows:
            existing = next((item for item in merged if item.key == row.key), None)
            if existing:
                existing.quantity += row.quantity
            else:
                merged.append(row)
        return merged

    def _persist(self) -> None:
        try:
            self.storage.save(self.to_dict())
        except Exception as e:
            self.needs_flush = True
            logger.warning(f"Cart persistence failed, keeping in-memory state: {e}", exc_info=True)
            return
        self.needs_flush = False
