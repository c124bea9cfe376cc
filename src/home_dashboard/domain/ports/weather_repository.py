"""Weather repository port."""

from typing import Protocol

from home_dashboard.domain.models.weather import ForecastPoint, WeatherWarning


class WeatherRepository(Protocol):
    """Port for retrieving point forecasts and weather warnings."""

    async def get_forecast(self, latitude: float, longitude: float) -> list[ForecastPoint]:
        """Get the point forecast time series for a location."""
        ...

    async def get_warnings(self) -> list[WeatherWarning]:
        """Get currently active weather warnings."""
        ...
