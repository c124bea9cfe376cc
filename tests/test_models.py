"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import date, timedelta

import pytest
from dashboard_fakes import NOW, make_departure

from home_dashboard.domain.models import (
    CommuteDeparture,
    Departure,
    ForecastPoint,
    StopLabel,
    WeekSchedule,
    WorkDay,
    round_half_up,
)
from home_dashboard.domain.models.departure import dedupe_departures


class TestDeparture:
    """Tests for Departure."""

    def test_departure_is_frozen(self) -> None:
        """Given a departure, when modifying it, then FrozenInstanceError is raised."""
        departure = make_departure()

        with pytest.raises(FrozenInstanceError):
            departure.line = "482"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "delay_seconds,expected",
        [(0, 0), (29, 0), (31, 1), (150, 3), (240, 4), (-90, -1), (-120, -2)],
    )
    def test_delay_minutes_rounds(self, delay_seconds: int, expected: int) -> None:
        """Given a delay in seconds, when reading delay_minutes, then halves round up."""
        assert make_departure(delay_seconds=delay_seconds).delay_minutes == expected

    def test_defaults(self) -> None:
        """Given only required fields, when creating a departure, then defaults apply."""
        departure = Departure(
            trip_id="t",
            line="480",
            destination="Klinga",
            scheduled_time=NOW,
            real_time=NOW,
            delay_seconds=0,
        )

        assert departure.status == "on_time"
        assert departure.transport_type == "bus"
        assert departure.platform is None
        assert departure.is_cancelled is False


class TestDedupeDepartures:
    """Tests for dedupe_departures."""

    def test_keeps_first_of_identical_time_destination_and_line(self) -> None:
        """Given repeats of one departure, when deduping, then the first is kept in order."""
        first = make_departure("a", minutes=5)
        repeat = make_departure("b", minutes=5)
        other_line = make_departure("c", line="482", minutes=5)
        later = make_departure("d", minutes=6)

        result = dedupe_departures([first, repeat, other_line, later])

        assert [d.trip_id for d in result] == ["a", "c", "d"]


class TestCommuteDeparture:
    """Tests for CommuteDeparture."""

    @pytest.mark.parametrize("minutes_until,has_left", [(-1, True), (0, False), (5, False)])
    def test_has_left(self, minutes_until: int, has_left: bool) -> None:
        """Given minutes until departure, when checking has_left, then past departures left."""
        departure = make_departure()
        entry = CommuteDeparture(
            departure=departure,
            from_stop=StopLabel.CITY,
            to_stop_name="Klinga",
            minutes_until=minutes_until,
            travel_minutes=12,
            arrival_time=departure.real_time + timedelta(minutes=12),
        )

        assert entry.has_left is has_left


def test_stop_label_other() -> None:
    """Given a stop label, when asking for the other end, then the opposite label."""
    assert StopLabel.HOME.other is StopLabel.CITY
    assert StopLabel.CITY.other is StopLabel.HOME


def test_forecast_point_value() -> None:
    """Given a forecast point, when reading a parameter, then missing ones are None."""
    point = ForecastPoint(valid_time=NOW, parameters={"t": 14.3})

    assert point.value("t") == 14.3
    assert point.value("ws") is None


def test_week_schedule_free_days() -> None:
    """Given a week, when listing free days, then only non-working days are returned."""
    monday = date(2025, 6, 2)
    days = tuple(
        WorkDay(
            day_of_week=name,
            calendar_date=monday + timedelta(days=i),
            is_working=i < 5,
            is_today=False,
            is_holiday=False,
        )
        for i, name in enumerate(["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"])
    )
    schedule = WeekSchedule(week_number=23, year=2025, days=days)

    assert [d.day_of_week for d in schedule.free_days] == ["Sat", "Sun"]


@pytest.mark.parametrize(
    "value,expected", [(2.5, 3), (2.49, 2), (-9.5, -9), (-9.51, -10), (0.5, 1), (-0.5, 0), (4.0, 4)]
)
def test_round_half_up(value: float, expected: int) -> None:
    """Given a value, when rounding to a whole number, then halves go up towards positive."""
    assert round_half_up(value) == expected
