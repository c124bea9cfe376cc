"""Commute board view models."""

from dataclasses import dataclass, field
from datetime import datetime

from home_dashboard.domain.models.departure import Departure
from home_dashboard.domain.models.travel_time import StopLabel


@dataclass(frozen=True)
class CommuteDeparture:
    """A departure from one commute stop enriched with travel information."""

    departure: Departure
    from_stop: StopLabel
    to_stop_name: str
    minutes_until: int
    travel_minutes: int
    arrival_time: datetime

    @property
    def has_left(self) -> bool:
        """Whether the vehicle has already left the stop."""
        return self.minutes_until < 0


@dataclass(frozen=True)
class CommuteBoard:
    """Departures in both directions of the commute."""

    from_home: list[CommuteDeparture]
    from_city: list[CommuteDeparture]
    updated_at: datetime
    next_refresh_at: datetime | None = None
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
