"""
Namespaced JSON cache on top of the configured Django cache (Redis in production).
"""
import json
import logging
from typing import Any, Callable, Optional

from django.core.cache import cache

logger = logging.getLogger(__name__)


class RedisCache:
    """Stores JSON payloads under `<namespace>:<key>`.

    A non-positive timeout turns the cache into a pass-through so callers can
    disable caching from settings without branching.
    """

    def __init__(self, namespace: str, timeout: int = 60):
        self.namespace = namespace
        self.timeout = timeout

    def key_for(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    @property
    def enabled(self) -> bool:
        return self.timeout > 0

    def get(self, key: str) -> Optional[Any]:
        raw = cache.get(self.key_for(key))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning(f"Discarding unreadable cache entry {self.key_for(key)}")
            self.invalidate(key)
            return None

    def set(self, key: str, payload: Any) -> None:
        if not self.enabled:
            return
        cache.set(self.key_for(key), json.dumps(payload), self.timeout)

    def invalidate(self, *keys: str) -> None:
        cache.delete_many([self.key_for(key) for key in keys])

    def fetch(self, key: str, loader: Callable[[], Any]) -> Any:
        """Return the cached payload, loading and storing it on a miss."""
        if self.enabled:
            payload = self.get(key)
            if payload is not None:
                return payload
            logger.debug(f"Cache miss: {self.key_for(key)}")
        payload = loader()
        self.set(key, payload)
        return payload
