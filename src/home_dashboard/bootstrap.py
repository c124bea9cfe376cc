"""Wiring of adapters and services shared by the server and the CLI."""

import logging

import aiohttp

from home_dashboard.adapters.cache import ExpiringCache
from home_dashboard.adapters.config import AppConfig
from home_dashboard.adapters.smhi_api import SmhiHttpClient, SmhiWeatherRepository
from home_dashboard.adapters.trafiklab_api import (
    TrafiklabDepartureRepository,
    TrafiklabHttpClient,
    TrafiklabStopRepository,
)
from home_dashboard.application.services import (
    CommuteService,
    GardenService,
    HomeDashboardService,
    WeatherService,
)

logger = logging.getLogger(__name__)


def build_dashboard_service(
    config: AppConfig, session: aiohttp.ClientSession
) -> HomeDashboardService:
    """Create the dashboard service and its collaborators on a shared HTTP session."""
    if not config.trafiklab_api_key:
        logger.warning("TRAFIKLAB_API_KEY is not set, departures will not be available")

    tz = config.tz
    cache = ExpiringCache()
    commute_config = config.get_commute_config()

    trafiklab_client = TrafiklabHttpClient(
        session, config.trafiklab_api_key, timeout=config.trafiklab_api_timeout
    )
    smhi_repository = SmhiWeatherRepository(SmhiHttpClient(session))

    commute_service = CommuteService(
        TrafiklabDepartureRepository(trafiklab_client, tz, commute_config.relevant_lines),
        commute_config,
        cache,
        tz,
        departures_limit=config.departures_limit,
        cache_seconds=config.transport_cache_seconds,
    )
    weather_service = WeatherService(
        smhi_repository,
        cache,
        config.latitude,
        config.longitude,
        tz,
        cache_seconds=config.weather_cache_seconds,
    )
    garden_service = GardenService(
        smhi_repository,
        cache,
        config.latitude,
        config.longitude,
        tz,
        cache_seconds=config.garden_cache_seconds,
    )
    return HomeDashboardService(
        commute_service,
        weather_service,
        garden_service,
        TrafiklabStopRepository(trafiklab_client),
        tz,
    )
