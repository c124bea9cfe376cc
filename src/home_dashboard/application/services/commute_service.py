"""Commute board service."""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, tzinfo

from home_dashboard.application.services.refresh_policy import refresh_interval
from home_dashboard.application.services.trip_correlator import estimate_travel_time
from home_dashboard.domain.contracts.expiring_cache import ExpiringCacheProtocol
from home_dashboard.domain.models.commute_board import CommuteBoard, CommuteDeparture
from home_dashboard.domain.models.commute_configuration import CommuteConfiguration
from home_dashboard.domain.models.departure import Departure, dedupe_departures
from home_dashboard.domain.models.rounding import round_half_up
from home_dashboard.domain.models.travel_time import StopLabel
from home_dashboard.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)

DEFAULT_TRANSPORT_CACHE_SECONDS = 5 * 60
# Delay warnings only look at the next departures
WARNING_DEPARTURE_COUNT = 2
DELAYED_WARNING_MINUTES = 2
EARLY_WARNING_MINUTES = -1


def minutes_until(time: datetime, now: datetime) -> int:
    """Whole minutes from now until a time (negative when in the past)."""
    return round_half_up((time - now).total_seconds() / 60)


def matches_destination(departure: Departure, keywords: Sequence[str]) -> bool:
    """Whether the destination contains any keyword, ignoring case."""
    if not departure.destination:
        return False
    destination = departure.destination.lower()
    return any(keyword.lower() in destination for keyword in keywords)


def select_departures(
    departures: Sequence[Departure],
    lines: Sequence[str],
    destination_keywords: Sequence[str],
    now: datetime,
    max_minutes_since_departure: int,
) -> list[Departure]:
    """Filter, dedupe and sort departures for one direction of the commute."""
    selected = [
        d
        for d in departures
        if d.line in lines
        and matches_destination(d, destination_keywords)
        and minutes_until(d.real_time, now) > -max_minutes_since_departure
    ]
    return sorted(dedupe_departures(selected), key=lambda d: d.real_time)


def next_refresh_time(departures: Iterable[Departure], now: datetime) -> datetime | None:
    """One minute after the next future departure, on a whole minute."""
    upcoming = [d.real_time for d in departures if d.real_time > now]
    if not upcoming:
        return None
    refresh_at = min(upcoming) + timedelta(minutes=1)
    return refresh_at.replace(second=0, microsecond=0)


def delay_warnings(entries: Sequence[CommuteDeparture]) -> list[str]:
    """Display warnings for notably delayed or early departures."""
    warnings = []
    for entry in entries[:WARNING_DEPARTURE_COUNT]:
        delay = entry.departure.delay_minutes
        if delay > DELAYED_WARNING_MINUTES:
            warnings.append(f"Linje {entry.departure.line} är {delay} min försenad")
        elif delay < EARLY_WARNING_MINUTES:
            warnings.append(f"Linje {entry.departure.line} går {abs(delay)} min för tidigt")
    return warnings


class CommuteService:
    """Builds the commute board from departures at the two commute stops."""

    def __init__(
        self,
        departure_repository: DepartureRepository,
        commute_config: CommuteConfiguration,
        cache: ExpiringCacheProtocol,
        timezone: tzinfo,
        departures_limit: int = 10,
        cache_seconds: float = DEFAULT_TRANSPORT_CACHE_SECONDS,
    ) -> None:
        """Initialize the service.

        Args:
            departure_repository: Repository for fetching departures.
            commute_config: The commute stops and filters.
            cache: Cache for raw departures per stop.
            timezone: Timezone used for the current time.
            departures_limit: Departures to fetch per stop.
            cache_seconds: Daytime lifetime of cached departures.
        """
        self._departure_repository = departure_repository
        self._config = commute_config
        self._cache = cache
        self._timezone = timezone
        self._departures_limit = departures_limit
        self._cache_seconds = cache_seconds

    def _now(self) -> datetime:
        return datetime.now(self._timezone)

    async def get_station_departures(
        self, stop_id: str, now: datetime | None = None
    ) -> list[Departure]:
        """Get departures for a stop, served from cache while fresh."""
        cache_key = f"departures_{stop_id}"
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Using {len(cached)} cached departures for stop {stop_id}")
            return cached

        departures = await self._departure_repository.get_departures(
            stop_id, limit=self._departures_limit
        )
        ttl = refresh_interval(self._cache_seconds, now or self._now())
        self._cache.set(cache_key, departures, ttl)
        logger.info(f"Fetched {len(departures)} departures for stop {stop_id}, caching {ttl:.0f}s")
        return departures

    def _build_entries(
        self,
        departures: Sequence[Departure],
        from_stop: StopLabel,
        other_stop_departures: Sequence[Departure],
        now: datetime,
    ) -> list[CommuteDeparture]:
        if from_stop is StopLabel.HOME:
            to_stop_name = self._config.city_stop_name
        else:
            to_stop_name = self._config.home_stop_name
        entries = []
        for departure in departures[: self._config.departures_per_direction]:
            travel_minutes = estimate_travel_time(departure, from_stop, other_stop_departures)
            entries.append(
                CommuteDeparture(
                    departure=departure,
                    from_stop=from_stop,
                    to_stop_name=to_stop_name,
                    minutes_until=minutes_until(departure.real_time, now),
                    travel_minutes=travel_minutes,
                    arrival_time=departure.real_time + timedelta(minutes=travel_minutes),
                )
            )
        return entries

    async def get_board(self, now: datetime | None = None) -> CommuteBoard:
        """Get the commute board for both directions.

        Upstream failures produce an empty board carrying an error message.
        """
        if now is None:
            now = self._now()

        try:
            home_raw, city_raw = await asyncio.gather(
                self.get_station_departures(self._config.home_stop_id, now),
                self.get_station_departures(self._config.city_stop_id, now),
            )
        except Exception as e:
            logger.error(f"Failed to fetch commute departures: {e}", exc_info=True)
            return CommuteBoard(
                from_home=[],
                from_city=[],
                updated_at=now,
                error="Kunde inte hämta avgångar, försök igen senare",
            )

        home_departures = select_departures(
            home_raw,
            self._config.relevant_lines,
            self._config.city_bound_keywords,
            now,
            self._config.max_minutes_since_departure,
        )
        city_departures = select_departures(
            city_raw,
            self._config.relevant_lines,
            self._config.home_bound_keywords,
            now,
            self._config.max_minutes_since_departure,
        )
        logger.info(
            f"{self._config.home_stop_name}: {len(home_departures)} of {len(home_raw)} selected, "
            f"{self._config.city_stop_name}: {len(city_departures)} of {len(city_raw)} selected"
        )

        from_home = self._build_entries(home_departures, StopLabel.HOME, city_raw, now)
        from_city = self._build_entries(city_departures, StopLabel.CITY, home_raw, now)

        return CommuteBoard(
            from_home=from_home,
            from_city=from_city,
            updated_at=now,
            next_refresh_at=next_refresh_time([*home_departures, *city_departures], now),
            warnings=delay_warnings([*from_home, *from_city]),
        )
