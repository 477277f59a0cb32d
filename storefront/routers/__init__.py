"""FastAPI routers for the storefront webapp and admin panel."""
