"""Contracts (protocols) shared between layers."""

from home_dashboard.domain.contracts.expiring_cache import ExpiringCacheProtocol

__all__ = ["ExpiringCacheProtocol"]
