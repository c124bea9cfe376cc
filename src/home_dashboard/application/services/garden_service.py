"""Gardening advice derived from the SMHI point forecast."""

import logging
from collections.abc import Sequence
from datetime import date, datetime, tzinfo

from home_dashboard.application.services.refresh_policy import refresh_interval
from home_dashboard.domain.contracts.expiring_cache import ExpiringCacheProtocol
from home_dashboard.domain.models.garden import AirTemperature, GardenReport
from home_dashboard.domain.models.rounding import round_half_up
from home_dashboard.domain.models.weather import ForecastPoint
from home_dashboard.domain.ports.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

DEFAULT_GARDEN_CACHE_SECONDS = 30 * 60
CACHE_KEY = "garden_data"
FORECAST_HOURS = 24
# SMHI reports total cloud cover in octas
CLOUD_COVER_MAX_OCTAS = 8

SEASONAL_TIPS: dict[int, list[str]] = {
    1: ["Planera årets odling", "Beställ frön och plantor", "Reparera växthus"],
    2: [
        "Förkultivera chili och paprika",
        "Kontrollera belysning i växthus",
        "Läs om nya odlingsmetoder",
    ],
    3: [
        "Förkultivera tomater och paprika inomhus",
        "Plantera lök och vitlök",
        "Beskär fruktträd",
    ],
    4: [
        "Så spenat och rädisa i växthus",
        "Förbered odlingsbäddar",
        "Plantera ut härdiga växter",
    ],
    5: [
        "Plantera potatis när jorden är varm",
        "Så morötter och ärtor direkt",
        "Plantera ut efter sista frost",
    ],
    6: ["Plantera ut tomater och gurkor", "Börja regelbunden vattning", "Så bönor och squash"],
    7: ["Vattna regelbundet i värmen", "Skörda tidiga grönsaker", "Så höstgrönsaker"],
    8: ["Skörda tomater och gurkor", "Så vintergrönsaker", "Extra vattning vid torka"],
    9: ["Skörda äpplen och päron", "Skörda potatis", "Plantera vinterlök"],
    10: ["Rensa och kompostera", "Skörda rotfrukter", "Förbered för vintern"],
    11: ["Sista skörd av kål", "Täck känsliga växter", "Planera nästa års odling"],
    12: ["Läs odlingsböcker", "Beställ frön för nästa år", "Underhåll trädgårdsverktyg"],
}


def soil_temperature(air_temperature: float, today: date) -> float:
    """Estimate soil temperature from air temperature and season."""
    if 5 <= today.month <= 10:
        difference = 2
    elif 3 <= today.month <= 4:
        difference = 4
    else:
        difference = 3
    return max(-10.0, min(25.0, air_temperature - difference))


def has_frost_risk(min_temperature: float, current_temperature: float) -> bool:
    """Whether there is a risk of frost."""
    return min_temperature <= 2 or current_temperature <= 4


def last_frost_date(today: date) -> date:
    """Typical last frost date for the season (growing zone 3)."""
    if today.month < 5 or (today.month == 5 and today.day < 20):
        return date(today.year, 4, 20)
    return date(today.year, 4, 15)


def planting_advice(soil_temp: float, air_temp: float, frost_risk: bool) -> list[str]:
    """Planting advice for the current conditions."""
    advice = []
    if frost_risk:
        advice.append("Frostrisk - vänta med känsliga växter")
        advice.append("Täck över plantor på natten")

    if soil_temp < 8:
        advice.append("För kallt för potatis (vänta till 8°C)")
    elif soil_temp < 12:
        advice.append("Bra tid för potatis-plantering")

    if soil_temp >= 10:
        advice.append("Bra tid för de flesta grönsaker")

    if air_temp >= 15 and not frost_risk:
        advice.append("Säkert att plantera ut sommarblommor")

    if not advice:
        advice.append("Kontrollera väderprognosen innan plantering")
    return advice


def seasonal_tips(today: date) -> list[str]:
    """Gardening tips for the month."""
    return list(SEASONAL_TIPS[today.month])


def _value_or(point: ForecastPoint, name: str, default: float) -> float:
    value = point.value(name)
    return default if value is None else value


def build_garden_report(points: Sequence[ForecastPoint], today: date) -> GardenReport:
    """Build the garden report from forecast time steps.

    Raises:
        ValueError: If the forecast has no time steps.
    """
    if not points:
        raise ValueError("No forecast data available")

    current = points[0]
    current_temp = _value_or(current, "t", 0.0)
    min_temp = max_temp = current_temp
    sun_hours = 0.0
    for point in points[:FORECAST_HOURS]:
        temperature = point.value("t")
        if temperature is not None:
            min_temp = min(min_temp, temperature)
            max_temp = max(max_temp, temperature)
        cloud_cover = _value_or(point, "tcc_mean", CLOUD_COVER_MAX_OCTAS / 2)
        sun_hours += max(0.0, (CLOUD_COVER_MAX_OCTAS - cloud_cover) / CLOUD_COVER_MAX_OCTAS)

    soil_temp = soil_temperature(current_temp, today)
    frost_risk = has_frost_risk(min_temp, current_temp)

    return GardenReport(
        soil_temperature=round(soil_temp, 1),
        air_temperature=AirTemperature(
            current=round(current_temp, 1), min=round(min_temp, 1), max=round(max_temp, 1)
        ),
        precipitation=round(_value_or(current, "pcat", 0.0), 1),
        humidity=round_half_up(_value_or(current, "r", 70.0)),
        wind_speed=round(_value_or(current, "ws", 3.0), 1),
        sun_hours=round(sun_hours, 1),
        frost_risk=frost_risk,
        last_frost_date=last_frost_date(today),
        planting_advice=planting_advice(soil_temp, current_temp, frost_risk),
        seasonal_tips=seasonal_tips(today),
    )


def fallback_garden_report(today: date) -> GardenReport:
    """Fixed garden report shown when SMHI is unavailable."""
    return GardenReport(
        soil_temperature=6.0,
        air_temperature=AirTemperature(current=8.0, min=4.0, max=12.0),
        precipitation=0.0,
        humidity=75,
        wind_speed=3.5,
        sun_hours=6.0,
        frost_risk=True,
        last_frost_date=date(today.year, 4, 20),
        planting_advice=["SMHI-data ej tillgänglig", "Kontrollera väderprognosen"],
        seasonal_tips=seasonal_tips(today),
        is_fallback=True,
    )


class GardenService:
    """Fetches the forecast and derives gardening advice."""

    def __init__(
        self,
        weather_repository: WeatherRepository,
        cache: ExpiringCacheProtocol,
        latitude: float,
        longitude: float,
        timezone: tzinfo,
        cache_seconds: float = DEFAULT_GARDEN_CACHE_SECONDS,
    ) -> None:
        """Initialize with a weather repository, cache and location."""
        self._weather_repository = weather_repository
        self._cache = cache
        self._latitude = latitude
        self._longitude = longitude
        self._timezone = timezone
        self._cache_seconds = cache_seconds

    async def get_garden(self, now: datetime | None = None) -> GardenReport:
        """Get the garden report, falling back to fixed values on errors."""
        if now is None:
            now = datetime.now(self._timezone)

        cached = self._cache.get(CACHE_KEY)
        if cached is not None:
            return cached

        try:
            points = await self._weather_repository.get_forecast(self._latitude, self._longitude)
            report = build_garden_report(points, now.date())
        except Exception as e:
            logger.error(f"Error fetching garden data from SMHI, using fallback: {e}")
            return fallback_garden_report(now.date())

        logger.info(
            f"Garden data fetched - soil temperature {report.soil_temperature}°C, "
            f"frost risk {report.frost_risk}"
        )
        self._cache.set(CACHE_KEY, report, refresh_interval(self._cache_seconds, now))
        return report
