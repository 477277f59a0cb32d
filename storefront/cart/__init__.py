"""Cart package: line item models, storage adapters, and the ledger."""
from .models import LedgerState, LineItem
from .storage import CartStorage, MemoryCartStorage, RedisCartStorage
from .ledger import CartLedger

__all__ = [
    "LedgerState",
    "LineItem",
    "CartStorage",
    "MemoryCartStorage",
    "RedisCartStorage",
    "CartLedger",
]
