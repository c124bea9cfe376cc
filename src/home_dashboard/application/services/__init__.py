"""Application services."""

from home_dashboard.application.services.commute_service import CommuteService
from home_dashboard.application.services.dashboard_service import HomeDashboardService
from home_dashboard.application.services.garden_service import GardenService
from home_dashboard.application.services.trip_correlator import (
    correlate_travel_time,
    estimate_travel_time,
)
from home_dashboard.application.services.weather_service import WeatherService
from home_dashboard.application.services.work_schedule import (
    get_current_and_next_week,
    get_week_schedule,
    is_working_tuesday,
    week_number,
)

__all__ = [
    "CommuteService",
    "GardenService",
    "HomeDashboardService",
    "WeatherService",
    "correlate_travel_time",
    "estimate_travel_time",
    "get_current_and_next_week",
    "get_week_schedule",
    "is_working_tuesday",
    "week_number",
]
