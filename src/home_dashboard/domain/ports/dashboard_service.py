"""Dashboard service port."""

from datetime import datetime
from typing import Protocol

from home_dashboard.domain.models.commute_board import CommuteBoard
from home_dashboard.domain.models.departure import Departure
from home_dashboard.domain.models.garden import GardenReport
from home_dashboard.domain.models.stop import StopGroup
from home_dashboard.domain.models.weather import WeatherReport
from home_dashboard.domain.models.week_schedule import WeekSchedule


class DashboardService(Protocol):
    """Port for everything the display surfaces need."""

    async def get_station_departures(self, stop_id: str) -> list[Departure]:
        """Get processed departures for a single stop."""
        ...

    async def get_commute_board(self, now: datetime | None = None) -> CommuteBoard:
        """Get the commute board for both directions."""
        ...

    async def get_weather(self, now: datetime | None = None) -> WeatherReport:
        """Get current weather, forecast and warnings."""
        ...

    async def get_garden(self, now: datetime | None = None) -> GardenReport:
        """Get the gardening report."""
        ...

    async def lookup_stops(self, name: str) -> list[StopGroup]:
        """Find stop groups by name."""
        ...

    def get_schedules(self, now: datetime | None = None) -> tuple[WeekSchedule, WeekSchedule]:
        """Get this week's and next week's work schedules."""
        ...

    def get_schedule(
        self, week_number: int, year: int, now: datetime | None = None
    ) -> WeekSchedule:
        """Get the work schedule for a given week."""
        ...
