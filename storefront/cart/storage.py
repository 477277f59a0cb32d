"""Persistence adapters for the cart ledger.

A storage adapter saves and loads the full ledger state as a plain dict.
The ledger owns error handling: adapters simply raise.
"""
import json
from datetime import datetime, timezone
from typing import Optional, Protocol

from storefront.config import get_cart_ttl_seconds
from storefront.db import RedisKeys, get_redis_sync
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


class CartStorage(Protocol):
    """Load/save contract consumed by CartLedger."""

    def load(self) -> Optional[dict]:
        ...

    def save(self, state: dict) -> None:
        ...


class MemoryCartStorage:
    """In-process storage. Used by tests and local tooling."""

    def __init__(self, state: Optional[dict] = None):
        self.state = state
        self.saves = 0

    def load(self) -> Optional[dict]:
        return self.state

    def save(self, state: dict) -> None:
        self.state = state
        self.saves += 1


class RedisCartStorage:
    """
    Stores one cart per device/session in Upstash Redis.

    Key: cart:{session_id}, value: JSON document, TTL refreshed on save.
    Saving an empty cart deletes the key.
    """

    def __init__(self, session_id: str, redis=None, ttl: Optional[int] = None):
        if not session_id:
            raise ValueError("session_id must be a non-empty string")
        self.session_id = session_id
        self.key = RedisKeys.cart_key(session_id)
        self.ttl = ttl or get_cart_ttl_seconds()
        self._redis = redis  # Lazy initialization

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = get_redis_sync()
        return self._redis

    def load(self) -> Optional[dict]:
        data = self.redis.get(self.key)
        if not data:
            return None
        try:
            return json.loads(data)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(
                f"Corrupted cart payload for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
            self.redis.delete(self.key)
            return None

    def save(self, state: dict) -> None:
        if not state.get("items"):
            self.redis.delete(self.key)
            return

        payload = dict(state)
        payload["updated_at"] = datetime.now(timezone.utc).isoformat()
        self.redis.set(self.key, json.dumps(payload), ex=self.ttl)
