"""Weather domain models."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class ForecastPoint:
    """One forecast time step with its parameter values keyed by SMHI name."""

    valid_time: datetime
    parameters: dict[str, float]

    def value(self, name: str) -> float | None:
        """Return the value of a parameter, or None if it is missing."""
        return self.parameters.get(name)


@dataclass(frozen=True)
class CurrentWeather:
    """Current conditions at the dashboard location."""

    temperature: int
    humidity: int
    wind_speed_kmh: int
    wind_direction: int
    visibility_km: int
    weather_symbol: int
    description: str


@dataclass(frozen=True)
class DailyForecast:
    """Forecast summary for one local calendar day."""

    date: date
    day_name: str
    max_temp: int
    min_temp: int
    weather_symbol: int
    description: str


@dataclass(frozen=True)
class WeatherWarning:
    """An active weather warning."""

    id: str
    title: str
    description: str
    severity: str
    valid_from: datetime | None
    valid_to: datetime | None


@dataclass(frozen=True)
class WeatherReport:
    """Current weather, daily forecast and warnings."""

    current: CurrentWeather
    forecast: list[DailyForecast]
    warnings: list[WeatherWarning] = field(default_factory=list)
    is_fallback: bool = False
