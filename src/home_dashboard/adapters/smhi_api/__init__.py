"""SMHI open data adapters."""

from home_dashboard.adapters.smhi_api.errors import SmhiApiError
from home_dashboard.adapters.smhi_api.http_client import SmhiHttpClient
from home_dashboard.adapters.smhi_api.smhi_weather_repository import SmhiWeatherRepository

__all__ = ["SmhiApiError", "SmhiHttpClient", "SmhiWeatherRepository"]
