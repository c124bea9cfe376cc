"""Domain models for the home dashboard."""

from home_dashboard.domain.models.commute_board import CommuteBoard, CommuteDeparture
from home_dashboard.domain.models.commute_configuration import CommuteConfiguration
from home_dashboard.domain.models.departure import Departure
from home_dashboard.domain.models.garden import AirTemperature, GardenReport
from home_dashboard.domain.models.stop import Stop, StopGroup
from home_dashboard.domain.models.travel_time import (
    StopLabel,
    TravelTimeEstimate,
    TravelTimeSource,
)
from home_dashboard.domain.models.weather import (
    CurrentWeather,
    DailyForecast,
    ForecastPoint,
    WeatherReport,
    WeatherWarning,
)
from home_dashboard.domain.models.rounding import round_half_up
from home_dashboard.domain.models.week_schedule import WeekSchedule, WorkDay

__all__ = [
    "AirTemperature",
    "CommuteBoard",
    "CommuteConfiguration",
    "CommuteDeparture",
    "CurrentWeather",
    "DailyForecast",
    "Departure",
    "ForecastPoint",
    "GardenReport",
    "Stop",
    "StopGroup",
    "StopLabel",
    "TravelTimeEstimate",
    "TravelTimeSource",
    "WeatherReport",
    "WeatherWarning",
    "round_half_up",
    "WeekSchedule",
    "WorkDay",
]
