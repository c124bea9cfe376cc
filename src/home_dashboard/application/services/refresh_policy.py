"""Day/night refresh policy for cached upstream data."""

from datetime import datetime

DAY_START_HOUR = 6
NIGHT_START_HOUR = 23
NIGHT_MULTIPLIER = 6


def is_day_time(now: datetime) -> bool:
    """Whether the dashboard is in its daytime refresh window."""
    return DAY_START_HOUR <= now.hour < NIGHT_START_HOUR


def refresh_interval(base_seconds: float, now: datetime) -> float:
    """Cache lifetime for data fetched at the given time.

    Data lives six times longer at night.
    """
    return base_seconds if is_day_time(now) else base_seconds * NIGHT_MULTIPLIER
