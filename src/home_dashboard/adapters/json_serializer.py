"""Conversion of domain objects to JSON-compatible data for the API and CLI."""

from typing import Any

from pydantic_core import to_jsonable_python

from home_dashboard.domain.models.commute_board import CommuteBoard, CommuteDeparture
from home_dashboard.domain.models.departure import Departure
from home_dashboard.domain.models.week_schedule import WeekSchedule


def to_jsonable(obj: Any) -> Any:
    """Convert dataclasses, dates and enums to JSON-compatible values."""
    return to_jsonable_python(obj)


def departure_to_dict(departure: Departure) -> dict[str, Any]:
    """Serialize a departure, including its delay in minutes."""
    data: dict[str, Any] = to_jsonable_python(departure)
    data["delay_minutes"] = departure.delay_minutes
    return data


def commute_departure_to_dict(entry: CommuteDeparture) -> dict[str, Any]:
    data: dict[str, Any] = to_jsonable_python(entry)
    data["departure"] = departure_to_dict(entry.departure)
    data["has_left"] = entry.has_left
    return data


def commute_board_to_dict(board: CommuteBoard) -> dict[str, Any]:
    """Serialize the commute board with computed fields on every entry."""
    data: dict[str, Any] = to_jsonable_python(board)
    data["from_home"] = [commute_departure_to_dict(e) for e in board.from_home]
    data["from_city"] = [commute_departure_to_dict(e) for e in board.from_city]
    return data


def week_schedule_to_dict(schedule: WeekSchedule, owner: str | None = None) -> dict[str, Any]:
    """Serialize a week schedule, optionally naming whose schedule it is."""
    data: dict[str, Any] = to_jsonable_python(schedule)
    data["free_days"] = [day.day_of_week for day in schedule.free_days]
    if owner is not None:
        data["owner"] = owner
    return data
