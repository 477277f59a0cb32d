"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")
os.environ.setdefault("ADMIN_API_KEY", "test_admin_key")
os.environ.setdefault("STORE_CURRENCY", "GTQ")

from storefront.cart import CartLedger, LineItem, MemoryCartStorage


class FailingStorage(MemoryCartStorage):
    """Memory storage whose save() can be switched to raise."""

    def __init__(self, state=None):
        super().__init__(state)
        self.fail = True

    def save(self, state):
        if self.fail:
            raise ConnectionError("storage quota exceeded")
        super().save(state)


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client: every builder call returns the same table mock."""
    client = Mock()

    table_mock = Mock()
    for method in ("select", "insert", "update", "delete", "eq", "order", "range", "limit"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock
    return client


@pytest.fixture
def memory_storage():
    return MemoryCartStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def ledger(memory_storage):
    return CartLedger(memory_storage)


@pytest.fixture
def make_item():
    """Factory for line items with sensible defaults."""
    def _make(product_id="P1", size="M", quantity=1, price="10.00", name=None):
        return LineItem(
            product_id=product_id,
            product_name=name or f"Product {product_id}",
            unit_price=price,
            size=size,
            quantity=quantity,
            image_url=f"https://cdn.test/{product_id}.jpg",
        )
    return _make


@pytest.fixture
def sample_product():
    """Sample products row"""
    return {
        "id": "prod-123",
        "name": "Blusa bordada",
        "description": "Blusa artesanal",
        "price": 185.50,
        "category": "blusas",
        "image_url": "https://cdn.test/blusa.jpg",
        "available_sizes": ["S", "M", "L"],
        "is_active": True,
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_order():
    """Sample orders row with embedded order_items"""
    return {
        "id": "order-1234567890",
        "user_id": "user-123",
        "status": "pendiente",
        "payment_method": "efectivo",
        "total": "371.00",
        "customer_name": "Ana López",
        "customer_email": "ana@example.com",
        "customer_phone": "5555-1234",
        "customer_address": "Zona 10, Ciudad de Guatemala",
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z",
        "order_items": [
            {
                "id": "item-1",
                "order_id": "order-1234567890",
                "product_id": "prod-123",
                "product_name": "Blusa bordada",
                "product_price": "185.50",
                "size": "M",
                "quantity": 2,
                "created_at": "2025-01-01T00:00:00Z",
            }
        ],
    }
