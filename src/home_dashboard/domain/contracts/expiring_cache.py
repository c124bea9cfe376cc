"""Protocol for time-based caching."""

from typing import Any, Protocol


class ExpiringCacheProtocol(Protocol):
    """Protocol for a key-value cache whose entries expire after a time to live."""

    def get(self, key: str) -> Any | None:
        """Get a cached value.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if missing or expired.
        """
        ...

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store a value.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl_seconds: Seconds until the entry expires.
        """
        ...

    def remove(self, key: str) -> None:
        """Remove a cached value if present."""
        ...
