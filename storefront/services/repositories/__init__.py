"""
Repository Pattern for Database Operations

- ProductRepository: product catalog reads and admin CRUD
- OrderRepository: orders, order items, status updates
"""
from .product_repo import ProductRepository
from .order_repo import OrderRepository

__all__ = [
    "ProductRepository",
    "OrderRepository",
]
