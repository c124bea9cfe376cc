"""Weather service turning SMHI point forecasts into a dashboard report."""

import asyncio
import logging
from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime, timedelta, tzinfo

from home_dashboard.application.services.refresh_policy import refresh_interval
from home_dashboard.domain.contracts.expiring_cache import ExpiringCacheProtocol
from home_dashboard.domain.models.rounding import round_half_up
from home_dashboard.domain.models.weather import (
    CurrentWeather,
    DailyForecast,
    ForecastPoint,
    WeatherReport,
    WeatherWarning,
)
from home_dashboard.domain.ports.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

DEFAULT_WEATHER_CACHE_SECONDS = 10 * 60
FORECAST_DAYS = 7
CACHE_KEY = "weather_data"

SHORT_DAY_NAMES = ("Mån", "Tis", "Ons", "Tor", "Fre", "Lör", "Sön")

WEATHER_SYMBOLS: dict[int, str] = {
    1: "Klart",
    2: "Mestadels klart",
    3: "Växlande molnighet",
    4: "Halvklart",
    5: "Molnigt",
    6: "Mulet",
    7: "Dimma",
    8: "Lätt regnskur",
    9: "Måttlig regnskur",
    10: "Kraftig regnskur",
    11: "Åska",
    12: "Lätt snöblandat regn",
    13: "Måttligt snöblandat regn",
    14: "Kraftigt snöblandat regn",
    15: "Lätt snöfall",
    16: "Måttligt snöfall",
    17: "Kraftigt snöfall",
    18: "Regn",
    19: "Regn",
    20: "Regn",
    21: "Åska",
    22: "Snöblandat regn",
    23: "Snöblandat regn",
    24: "Snöblandat regn",
    25: "Snöfall",
    26: "Snöfall",
    27: "Snöfall",
}


def weather_description(symbol: int) -> str:
    """Swedish description of an SMHI weather symbol."""
    return WEATHER_SYMBOLS.get(symbol, "Okänt väder")


def short_day_name(d: date) -> str:
    """Swedish short weekday name."""
    return SHORT_DAY_NAMES[d.weekday()]


def parse_current_weather(point: ForecastPoint) -> CurrentWeather:
    """Current conditions from the first forecast time step."""

    def param(name: str) -> float:
        value = point.value(name)
        return value if value is not None else 0.0

    symbol = round_half_up(param("Wsymb2"))
    return CurrentWeather(
        temperature=round_half_up(param("t")),
        humidity=round_half_up(param("r")),
        wind_speed_kmh=round_half_up(param("ws") * 3.6),
        wind_direction=round_half_up(param("wd")),
        visibility_km=round_half_up(param("vis")),
        weather_symbol=symbol,
        description=weather_description(symbol),
    )


def build_daily_forecast(
    points: Sequence[ForecastPoint], timezone: tzinfo, days: int = FORECAST_DAYS
) -> list[DailyForecast]:
    """Group forecast time steps per local day into daily summaries."""
    temps: dict[date, list[float]] = {}
    symbols: dict[date, list[int]] = {}
    for point in points:
        day = point.valid_time.astimezone(timezone).date()
        temps.setdefault(day, [])
        symbols.setdefault(day, [])
        temperature = point.value("t")
        symbol = point.value("Wsymb2")
        if temperature is not None:
            temps[day].append(temperature)
        if symbol is not None:
            symbols[day].append(round_half_up(symbol))

    forecast = []
    for day in list(temps)[:days]:
        if not temps[day]:
            continue
        common_symbol = Counter(symbols[day]).most_common(1)[0][0] if symbols[day] else 1
        forecast.append(
            DailyForecast(
                date=day,
                day_name=short_day_name(day),
                max_temp=round_half_up(max(temps[day])),
                min_temp=round_half_up(min(temps[day])),
                weather_symbol=common_symbol,
                description=weather_description(common_symbol),
            )
        )
    return forecast


def fallback_weather_report(today: date) -> WeatherReport:
    """Fixed weather report shown when SMHI is unavailable."""
    forecast = [
        DailyForecast(
            date=today + timedelta(days=i),
            day_name=short_day_name(today + timedelta(days=i)),
            max_temp=12,
            min_temp=4,
            weather_symbol=3,
            description=weather_description(3),
        )
        for i in range(FORECAST_DAYS)
    ]
    return WeatherReport(
        current=CurrentWeather(
            temperature=8,
            humidity=72,
            wind_speed_kmh=12,
            wind_direction=225,
            visibility_km=15,
            weather_symbol=3,
            description=weather_description(3),
        ),
        forecast=forecast,
        warnings=[],
        is_fallback=True,
    )


class WeatherService:
    """Fetches and caches the weather report for the dashboard location."""

    def __init__(
        self,
        weather_repository: WeatherRepository,
        cache: ExpiringCacheProtocol,
        latitude: float,
        longitude: float,
        timezone: tzinfo,
        cache_seconds: float = DEFAULT_WEATHER_CACHE_SECONDS,
    ) -> None:
        """Initialize with a weather repository, cache and location."""
        self._weather_repository = weather_repository
        self._cache = cache
        self._latitude = latitude
        self._longitude = longitude
        self._timezone = timezone
        self._cache_seconds = cache_seconds

    async def _get_warnings(self) -> list[WeatherWarning]:
        try:
            return await self._weather_repository.get_warnings()
        except Exception as e:
            logger.warning(f"Failed to fetch weather warnings, skipping warnings: {e}")
            return []

    async def get_weather(self, now: datetime | None = None) -> WeatherReport:
        """Get the weather report, falling back to fixed values on errors."""
        if now is None:
            now = datetime.now(self._timezone)

        cached = self._cache.get(CACHE_KEY)
        if cached is not None:
            return cached

        try:
            points, warnings = await asyncio.gather(
                self._weather_repository.get_forecast(self._latitude, self._longitude),
                self._get_warnings(),
            )
            if not points:
                raise ValueError("SMHI forecast contained no time series")
        except Exception as e:
            logger.warning(f"Error fetching weather data, using fallback: {e}")
            return fallback_weather_report(now.date())

        report = WeatherReport(
            current=parse_current_weather(points[0]),
            forecast=build_daily_forecast(points, self._timezone),
            warnings=warnings,
        )
        self._cache.set(CACHE_KEY, report, refresh_interval(self._cache_seconds, now))
        return report
