"""Cache adapters."""

from home_dashboard.adapters.cache.expiring_cache import ExpiringCache

__all__ = ["ExpiringCache"]
