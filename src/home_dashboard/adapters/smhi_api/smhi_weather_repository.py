"""SMHI weather repository adapter."""

import logging
from datetime import datetime
from typing import Any

from home_dashboard.adapters.smhi_api.http_client import SmhiHttpClient
from home_dashboard.domain.models.weather import ForecastPoint, WeatherWarning
from home_dashboard.domain.ports.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Invalid SMHI timestamp: {value}")
        return None


def parse_forecast(data: dict[str, Any]) -> list[ForecastPoint]:
    """Parse an SMHI pmp3g response into forecast time steps.

    Each parameter contributes the first of its values. Time steps without a
    valid time are skipped.
    """
    points = []
    for entry in data.get("timeSeries") or []:
        valid_time = _parse_time(entry.get("validTime"))
        if valid_time is None:
            continue
        parameters = {}
        for parameter in entry.get("parameters") or []:
            name = parameter.get("name")
            values = parameter.get("values") or []
            if name and values:
                parameters[name] = float(values[0])
        points.append(ForecastPoint(valid_time=valid_time, parameters=parameters))
    return points


def parse_warnings(data: dict[str, Any]) -> list[WeatherWarning]:
    """Parse SMHI alerts, one warning per alert info block."""
    warnings = []
    for alert in data.get("alert") or []:
        identifier = str(alert.get("identifier", ""))
        for info in alert.get("info") or []:
            warnings.append(
                WeatherWarning(
                    id=identifier,
                    title=info.get("headline", ""),
                    description=info.get("description", ""),
                    severity=str(info.get("severity", "")).lower(),
                    valid_from=_parse_time(info.get("effective")),
                    valid_to=_parse_time(info.get("expires")),
                )
            )
    return warnings


class SmhiWeatherRepository(WeatherRepository):
    """Point forecasts and weather warnings from SMHI open data."""

    def __init__(self, http_client: SmhiHttpClient) -> None:
        """Initialize with an SMHI HTTP client."""
        self._http_client = http_client

    async def get_forecast(self, latitude: float, longitude: float) -> list[ForecastPoint]:
        """Get the point forecast time series for a location."""
        data = await self._http_client.fetch_forecast(latitude, longitude)
        points = parse_forecast(data)
        logger.debug(f"SMHI forecast for {latitude},{longitude}: {len(points)} time steps")
        return points

    async def get_warnings(self) -> list[WeatherWarning]:
        """Get currently active weather warnings."""
        data = await self._http_client.fetch_warnings()
        warnings = parse_warnings(data)
        logger.debug(f"SMHI reports {len(warnings)} active warnings")
        return warnings
