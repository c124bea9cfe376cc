"""Garden advisory domain model."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class AirTemperature:
    """Air temperature for the next 24 hours."""

    current: float
    min: float
    max: float


@dataclass(frozen=True)
class GardenReport:
    """Gardening conditions and advice."""

    soil_temperature: float
    air_temperature: AirTemperature
    precipitation: float
    humidity: int
    wind_speed: float
    sun_hours: float
    frost_risk: bool
    last_frost_date: date | None
    planting_advice: list[str] = field(default_factory=list)
    seasonal_tips: list[str] = field(default_factory=list)
    is_fallback: bool = False
