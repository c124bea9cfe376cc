"""Domain layer - core models and ports."""

from home_dashboard.domain.models import (
    CommuteBoard,
    Departure,
    GardenReport,
    WeatherReport,
    WeekSchedule,
    WorkDay,
)
from home_dashboard.domain.ports import (
    DashboardService,
    DepartureRepository,
    StopRepository,
    WeatherRepository,
)

__all__ = [
    "CommuteBoard",
    "DashboardService",
    "Departure",
    "DepartureRepository",
    "GardenReport",
    "StopRepository",
    "WeatherReport",
    "WeatherRepository",
    "WeekSchedule",
    "WorkDay",
]
