"""Tests for API endpoints"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from api.index import app
from storefront.cart import CartLedger
from storefront.routers.deps import get_cart_ledger
from storefront.services.database import Database
from storefront.services.models import Order, Product

ADMIN_HEADERS = {"Authorization": "Bearer test_admin_key"}
SESSION_HEADERS = {"X-Cart-Session": "device-1"}


@pytest.fixture
def db(monkeypatch, mock_supabase_client):
    """Real Database wiring over a mocked client; repository calls are patched per test."""
    database = Database(mock_supabase_client)
    monkeypatch.setattr("storefront.services.database._db", database)
    monkeypatch.setenv("ADMIN_API_KEY", "test_admin_key")
    return database


@pytest.fixture
def cart(memory_storage):
    ledger = CartLedger(memory_storage)
    app.dependency_overrides[get_cart_ledger] = lambda: CartLedger(memory_storage)
    yield ledger
    app.dependency_overrides.pop(get_cart_ledger, None)


@pytest.fixture
def unsaved_cart(failing_storage, make_item):
    """Cart with 2 saved units whose storage rejects every further save."""
    failing_storage.fail = False
    CartLedger(failing_storage).add_item(make_item(quantity=2))
    failing_storage.fail = True
    app.dependency_overrides[get_cart_ledger] = lambda: CartLedger(failing_storage)
    yield failing_storage
    app.dependency_overrides.pop(get_cart_ledger, None)


@pytest.fixture
def client():
    """Test client"""
    return TestClient(app)


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "storefront"}


# ==================== CATALOG ====================

def test_get_products(client, db, sample_product):
    db.products_repo.get_all = AsyncMock(return_value=[Product(**sample_product)])

    response = client.get("/api/webapp/products?category=blusas")

    assert response.status_code == 200
    product = response.json()["products"][0]
    assert product["price"] == 185.5
    assert product["price_display"] == "Q185.50"
    db.products_repo.get_all.assert_awaited_once_with(active_only=True, category="blusas")


def test_get_product_not_found(client, db):
    db.products_repo.get_by_id = AsyncMock(return_value=None)

    response = client.get("/api/webapp/products/missing")

    assert response.status_code == 404


def test_inactive_product_hidden(client, db, sample_product):
    db.products_repo.get_by_id = AsyncMock(return_value=Product(**{**sample_product, "is_active": False}))

    response = client.get("/api/webapp/products/prod-123")

    assert response.status_code == 404


def test_get_categories(client, db):
    db.products_repo.get_categories = AsyncMock(return_value=["blusas", "vestidos"])

    response = client.get("/api/webapp/categories")

    assert response.json() == {"categories": ["blusas", "vestidos"]}


# ==================== CART ====================

def test_cart_requires_session(client, db):
    response = client.get("/api/webapp/cart")
    assert response.status_code == 400


def test_add_to_cart_merges_rows(client, db, cart, sample_product):
    db.products_repo.get_by_id = AsyncMock(return_value=Product(**sample_product))
    body = {"product_id": "prod-123", "size": "M", "quantity": 1}

    client.post("/api/webapp/cart/add", json=body, headers=SESSION_HEADERS)
    response = client.post("/api/webapp/cart/add", json={**body, "quantity": 2}, headers=SESSION_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert len(data["items"]) == 1
    assert data["item_count"] == 3
    assert data["total"] == 556.5
    assert data["total_display"] == "Q556.50"


def test_add_unknown_product(client, db, cart):
    db.products_repo.get_by_id = AsyncMock(return_value=None)

    response = client.post(
        "/api/webapp/cart/add",
        json={"product_id": "missing", "size": "M"},
        headers=SESSION_HEADERS,
    )

    assert response.status_code == 404


def test_add_invalid_size(client, db, cart, sample_product):
    db.products_repo.get_by_id = AsyncMock(return_value=Product(**sample_product))

    response = client.post(
        "/api/webapp/cart/add",
        json={"product_id": "prod-123", "size": "XXL"},
        headers=SESSION_HEADERS,
    )

    assert response.status_code == 400
    assert CartLedger(cart.storage).is_empty


def test_update_and_remove_cart_item(client, db, cart, make_item):
    cart.add_item(make_item(product_id="P1", size="M", price="10.00"))
    cart.add_item(make_item(product_id="P2", size="L", price="20.00"))

    response = client.patch(
        "/api/webapp/cart/item",
        json={"product_id": "P1", "size": "M", "quantity": 0},
        headers=SESSION_HEADERS,
    )
    assert response.json()["total"] == 30.0

    response = client.delete(
        "/api/webapp/cart/item",
        params={"product_id": "P2", "size": "L"},
        headers=SESSION_HEADERS,
    )
    assert response.json()["item_count"] == 1

    response = client.delete("/api/webapp/cart", headers=SESSION_HEADERS)
    assert response.json()["is_empty"] is True


# ==================== CHECKOUT ====================

CHECKOUT_BODY = {
    "name": "Ana López",
    "email": "ana@example.com",
    "phone": "5555-1234",
    "address": "Zona 10, Ciudad de Guatemala",
    "payment_method": "efectivo",
}


def test_checkout_success(client, db, cart, make_item, sample_order):
    cart.add_item(make_item(quantity=2))
    order_row = {k: v for k, v in sample_order.items() if k != "order_items"}
    db.orders_repo.create = AsyncMock(return_value=order_row)
    db.orders_repo.create_items = AsyncMock(return_value=sample_order["order_items"])

    response = client.post("/api/webapp/checkout", json=CHECKOUT_BODY, headers=SESSION_HEADERS)

    assert response.status_code == 201
    assert response.json()["short_id"] == "order-12"
    assert response.json()["cart_cleared"] is True
    assert CartLedger(cart.storage).is_empty


def test_checkout_empty_cart(client, db, cart):
    response = client.post("/api/webapp/checkout", json=CHECKOUT_BODY, headers=SESSION_HEADERS)
    assert response.status_code == 400


def test_checkout_failure_keeps_cart(client, db, cart, make_item):
    cart.add_item(make_item(quantity=2))
    db.orders_repo.create = AsyncMock(side_effect=RuntimeError("network error"))

    response = client.post("/api/webapp/checkout", json=CHECKOUT_BODY, headers=SESSION_HEADERS)

    assert response.status_code == 502
    assert CartLedger(cart.storage).get_item_count() == 2


# ==================== ADMIN ====================

def test_admin_requires_key(client, db):
    assert client.get("/api/admin/products").status_code == 403
    assert client.get("/api/admin/orders", headers={"Authorization": "Bearer wrong"}).status_code == 403


def test_admin_list_orders(client, db, sample_order):
    db.orders_repo.get_all = AsyncMock(return_value=[Order.from_row(sample_order)])

    response = client.get("/api/admin/orders?search=ana", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    order = response.json()["orders"][0]
    assert order["next_statuses"] == ["confirmado", "cancelado"]
    assert order["items"][0]["line_total"] == 371.0


def test_admin_illegal_status_change(client, db):
    db.orders_repo.get_status = AsyncMock(return_value="entregado")
    db.orders_repo.update_status = AsyncMock(return_value=True)

    response = client.patch(
        "/api/admin/orders/order-1/status",
        json={"status": "pendiente"},
        headers=ADMIN_HEADERS,
    )

    assert response.status_code == 409
    db.orders_repo.update_status.assert_not_called()


def test_admin_status_change(client, db):
    db.orders_repo.get_status = AsyncMock(return_value="pendiente")
    db.orders_repo.update_status = AsyncMock(return_value=True)

    response = client.patch(
        "/api/admin/orders/order-1/status",
        json={"status": "confirmado"},
        headers=ADMIN_HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "confirmado"


def test_admin_delete_product_not_found(client, db):
    db.products_repo.deactivate = AsyncMock(return_value=False)

    response = client.delete("/api/admin/products/missing", headers=ADMIN_HEADERS)

    assert response.status_code == 404


def test_admin_update_product_requires_fields(client, db):
    response = client.patch("/api/admin/products/prod-123", json={}, headers=ADMIN_HEADERS)
    assert response.status_code == 400


def test_admin_search_spans_all_pages(client, db, sample_order):
    others = [
        Order.from_row({**sample_order, "id": f"order-{i:04d}", "customer_name": "Luis Pérez"})
        for i in range(60)
    ]
    target = Order.from_row({**sample_order, "id": "order-maria", "customer_name": "María Gómez"})
    db.orders_repo.get_all = AsyncMock(return_value=others[:55] + [target] + others[55:])

    response = client.get("/api/admin/orders", params={"search": "maría", "limit": 50}, headers=ADMIN_HEADERS)

    assert [o["id"] for o in response.json()["orders"]] == ["order-maria"]
    db.orders_repo.get_all.assert_awaited_once_with(status=None, limit=None)


def test_admin_get_order(client, db, sample_order):
    db.orders_repo.get_by_id = AsyncMock(return_value=Order.from_row(sample_order))

    response = client.get("/api/admin/orders/order-1234567890", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json()["customer"]["name"] == "Ana López"


def test_admin_get_order_not_found(client, db):
    db.orders_repo.get_by_id = AsyncMock(return_value=None)

    response = client.get("/api/admin/orders/missing", headers=ADMIN_HEADERS)

    assert response.status_code == 404


# ==================== STORAGE FAILURES ====================

def test_unsaved_cart_change_returns_503(client, db, unsaved_cart):
    response = client.patch(
        "/api/webapp/cart/item",
        json={"product_id": "P1", "size": "M", "quantity": 5},
        headers=SESSION_HEADERS,
    )

    assert response.status_code == 503
    assert unsaved_cart.state["items"][0]["quantity"] == 2


def test_checkout_reports_cart_not_cleared(client, db, unsaved_cart, sample_order):
    order_row = {k: v for k, v in sample_order.items() if k != "order_items"}
    db.orders_repo.create = AsyncMock(return_value=order_row)
    db.orders_repo.create_items = AsyncMock(return_value=sample_order["order_items"])

    response = client.post("/api/webapp/checkout", json=CHECKOUT_BODY, headers=SESSION_HEADERS)

    assert response.status_code == 201
    assert response.json()["cart_cleared"] is False


def test_checkout_logs_uncleared_cart(client, db, unsaved_cart, sample_order, caplog):
    order_row = {k: v for k, v in sample_order.items() if k != "order_items"}
    db.orders_repo.create = AsyncMock(return_value=order_row)
    db.orders_repo.create_items = AsyncMock(return_value=sample_order["order_items"])

    client.post("/api/webapp/checkout", json=CHECKOUT_BODY, headers=SESSION_HEADERS)

    assert "could not be cleared" in caplog.text
