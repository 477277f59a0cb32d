"""
Storefront Core Module

This package contains the storefront building blocks:
- cart: cart ledger (line items, totals, persistence adapters)
- services: money helpers, Supabase repositories, catalog/order domains
- orders: order snapshots, checkout, status transitions
- routers: FastAPI routers for the webapp and admin panel

Note: Imports are lazy so that the cart ledger can be used
without the Supabase/FastAPI stack being importable.
"""

__all__ = [
    "CartLedger",
    "LineItem",
    "get_database",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartLedger":
        from storefront.cart import CartLedger
        return CartLedger
    if name == "LineItem":
        from storefront.cart import LineItem
        return LineItem
    if name == "get_database":
        from storefront.services.database import get_database
        return get_database
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
