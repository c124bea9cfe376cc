"""Travel time estimation by correlating one trip across two stops."""

import logging
from collections.abc import Sequence

from home_dashboard.domain.models.departure import Departure
from home_dashboard.domain.models.rounding import round_half_up
from home_dashboard.domain.models.travel_time import (
    StopLabel,
    TravelTimeEstimate,
    TravelTimeSource,
)

logger = logging.getLogger(__name__)

# Measured travel times outside this window are treated as noise
MIN_PLAUSIBLE_MINUTES = 5
MAX_PLAUSIBLE_MINUTES = 20

DEFAULT_FALLBACK_MINUTES = 10
FALLBACK_MINUTES_BY_LINE = {
    "480": 10,
    "482": 12,
}


def fallback_travel_time(line: str) -> int:
    """Static travel time estimate for a line."""
    return FALLBACK_MINUTES_BY_LINE.get(line, DEFAULT_FALLBACK_MINUTES)


def find_matching_trip(
    departure: Departure, other_stop_departures: Sequence[Departure]
) -> Departure | None:
    """Find the same vehicle journey in the other stop's departures.

    The first match in list order wins.
    """
    for candidate in other_stop_departures:
        if candidate.trip_id == departure.trip_id:
            return candidate
    return None


def _measured_minutes(departure: Departure, matched: Departure) -> int:
    diff_seconds = abs((matched.real_time - departure.real_time).total_seconds())
    return round_half_up(diff_seconds / 60)


def correlate_travel_time(
    departure: Departure,
    from_stop: StopLabel,
    other_stop_departures: Sequence[Departure],
) -> TravelTimeEstimate:
    """Estimate travel time and report whether it was measured or a fallback.

    Args:
        departure: Departure at the stop the journey starts from.
        from_stop: The stop the departure belongs to.
        other_stop_departures: Departures captured at the other stop.

    Returns:
        A measured estimate when the trip was found at the other stop and the
        clock difference is plausible, otherwise the line's fallback.
    """
    matched = find_matching_trip(departure, other_stop_departures)
    if matched is not None:
        minutes = _measured_minutes(departure, matched)
        if MIN_PLAUSIBLE_MINUTES <= minutes <= MAX_PLAUSIBLE_MINUTES:
            logger.debug(
                f"Measured travel time for trip {departure.trip_id} from {from_stop.value}: "
                f"{minutes} min"
            )
            return TravelTimeEstimate(minutes=minutes, source=TravelTimeSource.REAL)
        logger.debug(
            f"Measured travel time {minutes} min for trip {departure.trip_id} "
            f"is implausible, using fallback"
        )
    else:
        logger.debug(
            f"Trip {departure.trip_id} (line {departure.line}) not found at "
            f"{from_stop.other.value} stop, using fallback"
        )

    return TravelTimeEstimate(
        minutes=fallback_travel_time(departure.line), source=TravelTimeSource.FALLBACK
    )


def estimate_travel_time(
    departure: Departure,
    from_stop: StopLabel,
    other_stop_departures: Sequence[Departure],
) -> int:
    """Estimate travel time in minutes between the two commute stops."""
    return correlate_travel_time(departure, from_stop, other_stop_departures).minutes
