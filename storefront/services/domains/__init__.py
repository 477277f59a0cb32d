"""Domain services wrapping repositories."""
from .catalog import CatalogService

__all__ = [
    "CatalogService",
]
