"""Departure repository port."""

from typing import Protocol

from home_dashboard.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving departure information."""

    async def get_departures(self, stop_id: str, limit: int = 10) -> list[Departure]:
        """Get upcoming departures for a stop, sorted by realtime estimate."""
        ...
