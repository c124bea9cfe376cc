"""Trafiklab Realtime API adapters."""

from home_dashboard.adapters.trafiklab_api.departure_parser import TrafiklabDepartureParser
from home_dashboard.adapters.trafiklab_api.errors import (
    TrafiklabApiError,
    TrafiklabConfigurationError,
)
from home_dashboard.adapters.trafiklab_api.http_client import TrafiklabHttpClient
from home_dashboard.adapters.trafiklab_api.trafiklab_departure_repository import (
    TrafiklabDepartureRepository,
)
from home_dashboard.adapters.trafiklab_api.trafiklab_stop_repository import (
    TrafiklabStopRepository,
)

__all__ = [
    "TrafiklabApiError",
    "TrafiklabConfigurationError",
    "TrafiklabDepartureParser",
    "TrafiklabDepartureRepository",
    "TrafiklabHttpClient",
    "TrafiklabStopRepository",
]
