"""Dashboard facade used by the web and CLI surfaces."""

import logging
from datetime import datetime, tzinfo

from home_dashboard.application.services.commute_service import CommuteService
from home_dashboard.application.services.garden_service import GardenService
from home_dashboard.application.services.weather_service import WeatherService
from home_dashboard.application.services.work_schedule import (
    get_current_and_next_week,
    get_week_schedule,
)
from home_dashboard.domain.models.commute_board import CommuteBoard
from home_dashboard.domain.models.departure import Departure
from home_dashboard.domain.models.garden import GardenReport
from home_dashboard.domain.models.stop import StopGroup
from home_dashboard.domain.models.weather import WeatherReport
from home_dashboard.domain.models.week_schedule import WeekSchedule
from home_dashboard.domain.ports.stop_repository import StopRepository

logger = logging.getLogger(__name__)


class HomeDashboardService:
    """Combines transit, weather, garden and work schedule data."""

    def __init__(
        self,
        commute_service: CommuteService,
        weather_service: WeatherService,
        garden_service: GardenService,
        stop_repository: StopRepository,
        timezone: tzinfo,
    ) -> None:
        """Initialize with the underlying services."""
        self._commute_service = commute_service
        self._weather_service = weather_service
        self._garden_service = garden_service
        self._stop_repository = stop_repository
        self._timezone = timezone

    def _now(self, now: datetime | None) -> datetime:
        return now if now is not None else datetime.now(self._timezone)

    async def get_station_departures(self, stop_id: str) -> list[Departure]:
        """Get processed departures for a single stop."""
        return await self._commute_service.get_station_departures(stop_id)

    async def get_commute_board(self, now: datetime | None = None) -> CommuteBoard:
        """Get the commute board for both directions."""
        return await self._commute_service.get_board(self._now(now))

    async def get_weather(self, now: datetime | None = None) -> WeatherReport:
        """Get current weather, forecast and warnings."""
        return await self._weather_service.get_weather(self._now(now))

    async def get_garden(self, now: datetime | None = None) -> GardenReport:
        """Get the gardening report."""
        return await self._garden_service.get_garden(self._now(now))

    async def lookup_stops(self, name: str) -> list[StopGroup]:
        """Find stop groups by name."""
        return await self._stop_repository.find_stop_groups(name)

    def get_schedules(self, now: datetime | None = None) -> tuple[WeekSchedule, WeekSchedule]:
        """Get this week's and next week's work schedules."""
        return get_current_and_next_week(self._now(now).date())

    def get_schedule(
        self, week_number: int, year: int, now: datetime | None = None
    ) -> WeekSchedule:
        """Get the work schedule for a given week."""
        return get_week_schedule(week_number, year, today=self._now(now).date())
