"""Adapters layer - external system integrations."""

from home_dashboard.adapters.cache import ExpiringCache
from home_dashboard.adapters.config import AppConfig
from home_dashboard.adapters.smhi_api import SmhiHttpClient, SmhiWeatherRepository
from home_dashboard.adapters.trafiklab_api import (
    TrafiklabDepartureRepository,
    TrafiklabHttpClient,
    TrafiklabStopRepository,
)

__all__ = [
    "AppConfig",
    "ExpiringCache",
    "SmhiHttpClient",
    "SmhiWeatherRepository",
    "TrafiklabDepartureRepository",
    "TrafiklabHttpClient",
    "TrafiklabStopRepository",
]
