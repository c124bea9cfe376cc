"""Biweekly work schedule with Swedish public holidays.

The schedule rotates every other week between a "free Tuesday" week
(free on Tuesday and Sunday) and a "working Tuesday" week (free on Saturday
and Sunday). Week 22 is a free Tuesday week. Public holidays are always free.

Week numbers follow the dashboard's own numbering, not ISO-8601: the week
counter ticks over on Sundays, counted from January 1st of the date's year.
"""

import math
from datetime import date, datetime, timedelta

from home_dashboard.domain.models.week_schedule import DAY_NAMES, WeekSchedule, WorkDay

REFERENCE_FREE_TUESDAY_WEEK = 22

TUESDAY = 1
SATURDAY = 5
SUNDAY = 6

FIXED_HOLIDAYS: dict[tuple[int, int], str] = {
    (1, 1): "Nyårsdagen",
    (1, 6): "Trettondedag jul",
    (5, 1): "Första maj",
    (6, 6): "Sveriges nationaldag",
    (6, 24): "Midsommarafton",
    (6, 25): "Midsommardagen",
    (12, 24): "Julafton",
    (12, 25): "Juldagen",
    (12, 26): "Annandag jul",
    (12, 31): "Nyårsafton",
}

# Offsets in days from Easter Sunday
EASTER_RELATIVE_HOLIDAYS: dict[int, str] = {
    -2: "Långfredagen",
    0: "Påskdagen",
    1: "Annandag påsk",
    39: "Kristi himmelsfärdsdag",
    49: "Pingstdagen",
    50: "Annandag pingst",
}


def weekday_sunday_first(d: date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return (d.weekday() + 1) % 7


def week_number(d: date | datetime) -> int:
    """Week number of a date in the dashboard's week numbering."""
    if isinstance(d, datetime):
        d = d.date()
    first_day_of_year = date(d.year, 1, 1)
    past_days = (d - first_day_of_year).days
    return math.ceil((past_days + weekday_sunday_first(first_day_of_year) + 1) / 7)


def monday_of_week(week: int, year: int) -> date:
    """Monday of a week in the dashboard's week numbering."""
    jan1 = date(year, 1, 1)
    return jan1 + timedelta(days=(week - 1) * 7 - weekday_sunday_first(jan1) + 1)


def next_week(week: int, year: int) -> tuple[int, int]:
    """Week number and year of the week after the given one.

    Derived from the Monday seven days later, so the last week of a year
    rolls over into the following year.
    """
    following_monday = monday_of_week(week, year) + timedelta(days=7)
    return week_number(following_monday), following_monday.year


def is_working_tuesday(week: int) -> bool:
    """Whether Tuesday is a working day in the given week."""
    return (week - REFERENCE_FREE_TUESDAY_WEEK) % 2 != 0


def easter_sunday(year: int) -> date:
    """Easter Sunday of a Gregorian year (anonymous Gregorian algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def holiday_name(d: date) -> str | None:
    """Name of the Swedish public holiday on a date, if any."""
    fixed = FIXED_HOLIDAYS.get((d.month, d.day))
    if fixed:
        return fixed

    offset = (d - easter_sunday(d.year)).days
    return EASTER_RELATIVE_HOLIDAYS.get(offset)


def is_swedish_holiday(d: date) -> bool:
    """Whether a date is a Swedish public holiday."""
    return holiday_name(d) is not None


def _is_working_day(day_index: int, holiday: bool, working_tuesday: bool) -> bool:
    if holiday:
        return False
    if not working_tuesday:
        return day_index not in (TUESDAY, SUNDAY)
    return day_index not in (SATURDAY, SUNDAY)


def get_week_schedule(week: int, year: int, today: date) -> WeekSchedule:
    """Build the Monday to Sunday work schedule for a week.

    Args:
        week: Week number in the dashboard's week numbering.
        year: Year the week number belongs to.
        today: Date used to mark the current day, taken in the dashboard timezone
            by the caller.

    Returns:
        The week schedule with seven days.
    """
    monday = monday_of_week(week, year)
    working_tuesday = is_working_tuesday(week)

    days = []
    for index, day_name in enumerate(DAY_NAMES):
        current = monday + timedelta(days=index)
        holiday = is_swedish_holiday(current)
        days.append(
            WorkDay(
                day_of_week=day_name,
                calendar_date=current,
                is_working=_is_working_day(index, holiday, working_tuesday),
                is_today=current == today,
                is_holiday=holiday,
            )
        )

    return WeekSchedule(week_number=week, year=year, days=tuple(days))


def get_current_and_next_week(today: date) -> tuple[WeekSchedule, WeekSchedule]:
    """Schedules for the week containing today and the week after."""
    this_week = week_number(today)
    following_week, following_year = next_week(this_week, today.year)
    return (
        get_week_schedule(this_week, today.year, today=today),
        get_week_schedule(following_week, following_year, today=today),
    )
