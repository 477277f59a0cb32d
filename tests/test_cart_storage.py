"""Tests for the Redis cart storage adapter"""
import json
import pytest
from decimal import Decimal
from unittest.mock import Mock

from storefront.cart import CartLedger, RedisCartStorage


@pytest.fixture
def mock_redis():
    """Mock sync Upstash Redis client backed by a dict."""
    store = {}
    redis = Mock()
    redis.get.side_effect = lambda key: store.get(key)
    redis.set.side_effect = lambda key, value, ex=None: store.__setitem__(key, value)
    redis.delete.side_effect = lambda key: store.pop(key, None)
    redis.store = store
    return redis


def test_key_is_scoped_to_session(mock_redis):
    storage = RedisCartStorage("device-abc", redis=mock_redis)
    assert storage.key == "cart:device-abc"


def test_empty_session_rejected(mock_redis):
    with pytest.raises(ValueError):
        RedisCartStorage("", redis=mock_redis)


def test_save_writes_json_with_ttl(mock_redis, make_item):
    storage = RedisCartStorage("s1", redis=mock_redis, ttl=60)
    ledger = CartLedger(storage)

    ledger.add_item(make_item(price="10.10"))

    key, value = mock_redis.set.call_args.args
    assert key == "cart:s1"
    assert mock_redis.set.call_args.kwargs["ex"] == 60
    payload = json.loads(value)
    assert payload["items"][0]["unit_price"] == "10.10"
    assert "updated_at" in payload


def test_round_trip_through_redis(mock_redis, make_item):
    ledger = CartLedger(RedisCartStorage("s1", redis=mock_redis))
    ledger.add_item(make_item(product_id="P1", quantity=3, price="0.10"))

    restored = CartLedger(RedisCartStorage("s1", redis=mock_redis))

    assert restored.get_item_count() == 3
    assert restored.get_total() == Decimal("0.30")


def test_clear_deletes_key(mock_redis, make_item):
    ledger = CartLedger(RedisCartStorage("s1", redis=mock_redis))
    ledger.add_item(make_item())

    ledger.clear()

    mock_redis.delete.assert_called_with("cart:s1")
    assert "cart:s1" not in mock_redis.store


def test_corrupted_payload_is_discarded(mock_redis):
    mock_redis.store["cart:s1"] = "{not json"

    ledger = CartLedger(RedisCartStorage("s1", redis=mock_redis))

    assert ledger.is_empty
    assert "cart:s1" not in mock_redis.store


def test_redis_outage_is_not_fatal(make_item):
    redis = Mock()
    redis.get.return_value = None
    redis.set.side_effect = ConnectionError("redis down")
    ledger = CartLedger(RedisCartStorage("s1", redis=redis))

    ledger.add_item(make_item(quantity=2))

    assert ledger.get_item_count() == 2
    assert ledger.needs_flush is True


def test_persistence_failure_is_logged(make_item, caplog):
    redis = Mock()
    redis.get.return_value = None
    redis.set.side_effect = ConnectionError("redis down")
    ledger = CartLedger(RedisCartStorage("s1", redis=redis))

    ledger.add_item(make_item())

    assert "Cart persistence failed" in caplog.text
