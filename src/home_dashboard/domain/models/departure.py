"""Departure domain model."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from home_dashboard.domain.models.rounding import round_half_up


@dataclass(frozen=True)
class Departure:
    """Represents a single departure of one vehicle journey from a stop."""

    trip_id: str
    line: str
    destination: str
    scheduled_time: datetime
    real_time: datetime
    delay_seconds: int
    status: str = "on_time"  # "on_time", "delayed", "early" or "cancelled"
    platform: str | None = None
    transport_type: str = "bus"
    is_realtime: bool = True
    is_cancelled: bool = False

    @property
    def delay_minutes(self) -> int:
        """Delay in whole minutes, halves rounded up (negative when early)."""
        return round_half_up(self.delay_seconds / 60)


def dedupe_departures(departures: Iterable[Departure]) -> list[Departure]:
    """Drop repeated departures with the same realtime, destination and line."""
    seen: set[tuple[datetime, str, str]] = set()
    unique = []
    for departure in departures:
        key = (departure.real_time, departure.destination, departure.line)
        if key in seen:
            continue
        seen.add(key)
        unique.append(departure)
    return unique
