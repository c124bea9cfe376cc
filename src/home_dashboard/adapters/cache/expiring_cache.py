"""In-memory cache with per-entry expiry."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from home_dashboard.domain.contracts.expiring_cache import ExpiringCacheProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CacheEntry:
    value: Any
    expires_at: float


class ExpiringCache(ExpiringCacheProtocol):
    """Key-value cache where every entry carries its own expiry instant."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize the cache.

        Args:
            clock: Returns the current time in seconds, monotonic by default.
        """
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}

    def get(self, key: str) -> Any | None:
        """Get a cached value, evicting it if it has expired.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if missing or expired.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            logger.debug(f"Cache entry '{key}' expired")
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store a value that expires after ttl_seconds."""
        self._entries[key] = _CacheEntry(value=value, expires_at=self._clock() + ttl_seconds)

    def remove(self, key: str) -> None:
        """Remove a cached value if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all cached values."""
        self._entries.clear()

    def is_expired(self, key: str) -> bool:
        """Whether a key is missing or expired."""
        entry = self._entries.get(key)
        return entry is None or self._clock() >= entry.expires_at
