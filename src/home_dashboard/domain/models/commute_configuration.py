"""Commute configuration domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommuteConfiguration:
    """The two stops of the commute and how to pick relevant departures."""

    home_stop_id: str
    home_stop_name: str
    city_stop_id: str
    city_stop_name: str
    relevant_lines: list[str] = field(default_factory=lambda: ["480", "482", "486"])
    # Case-insensitive substrings of the destination for departures leaving home
    city_bound_keywords: list[str] = field(
        default_factory=lambda: ["norrköping", "östra station", "söder tull"]
    )
    # Case-insensitive substrings of the destination for departures leaving the city stop
    home_bound_keywords: list[str] = field(
        default_factory=lambda: ["klinga", "skärblacka", "kimstad", "strömporten"]
    )
    departures_per_direction: int = 2
    # Departures that left longer ago than this are hidden
    max_minutes_since_departure: int = 10
