"""Parser for Trafiklab Realtime departure responses."""

import logging
from datetime import datetime, tzinfo
from typing import Any

from home_dashboard.adapters.trafiklab_api.constants import (
    DEFAULT_TRANSPORT_TYPE,
    TRANSPORT_TYPES,
)
from home_dashboard.domain.models.departure import Departure

logger = logging.getLogger(__name__)


class TrafiklabDepartureParser:
    """Parses Trafiklab departure records into Departure objects.

    Trafiklab reports local wall-clock times without an offset, so the parser
    attaches the configured timezone.
    """

    def __init__(self, timezone: tzinfo) -> None:
        """Initialize with the timezone of the upstream timestamps."""
        self._timezone = timezone

    def parse_departures(self, departures: list[dict[str, Any]]) -> list[Departure]:
        """Parse departures, skipping malformed records."""
        results = []
        for dep in departures:
            departure = self.parse_departure(dep)
            if departure is not None:
                results.append(departure)
        return results

    def parse_departure(self, dep: dict[str, Any]) -> Departure | None:
        """Parse a single departure record.

        Returns:
            The departure, or None if the record lacks a trip, line or time.
        """
        try:
            route = dep.get("route") or {}
            trip = dep.get("trip") or {}

            scheduled_time = self._parse_time(dep.get("scheduled"))
            real_time = self._parse_time(dep.get("realtime")) or scheduled_time
            line = route.get("designation") or route.get("name")
            trip_id = trip.get("trip_id")
            if scheduled_time is None or real_time is None or not line or not trip_id:
                logger.warning(f"Skipping incomplete Trafiklab departure: {dep!r:.200}")
                return None

            delay_seconds = int(dep.get("delay") or 0)
            is_cancelled = bool(dep.get("canceled", False))

            return Departure(
                trip_id=str(trip_id),
                line=str(line),
                destination=(route.get("destination") or {}).get("name", ""),
                scheduled_time=scheduled_time,
                real_time=real_time,
                delay_seconds=delay_seconds,
                status=self._status(delay_seconds, is_cancelled),
                platform=self._parse_platform(dep),
                transport_type=self._transport_type(route.get("transport_mode")),
                is_realtime=bool(dep.get("is_realtime", True)),
                is_cancelled=is_cancelled,
            )
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Error parsing Trafiklab departure: {e}")
            return None

    def _parse_time(self, value: str | None) -> datetime | None:
        """Parse an ISO 8601 timestamp, attaching the local timezone if naive."""
        if not value:
            return None
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=self._timezone)
        return parsed.astimezone(self._timezone)

    @staticmethod
    def _status(delay_seconds: int, is_cancelled: bool) -> str:
        if is_cancelled:
            return "cancelled"
        if delay_seconds == 0:
            return "on_time"
        if delay_seconds > 0:
            return "delayed"
        return "early"

    @staticmethod
    def _parse_platform(dep: dict[str, Any]) -> str | None:
        """Realtime platform designation, falling back to the scheduled one."""
        for key in ("realtime_platform", "scheduled_platform"):
            platform = dep.get(key) or {}
            designation = platform.get("designation")
            if designation:
                return str(designation)
        return None

    @staticmethod
    def _transport_type(mode: str | None) -> str:
        if not mode:
            return DEFAULT_TRANSPORT_TYPE
        return TRANSPORT_TYPES.get(mode.lower(), DEFAULT_TRANSPORT_TYPE)
