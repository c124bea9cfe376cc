"""Work schedule domain models."""

from dataclasses import dataclass
from datetime import date

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class WorkDay:
    """One day of a week schedule."""

    day_of_week: str
    calendar_date: date
    is_working: bool
    is_today: bool
    is_holiday: bool


@dataclass(frozen=True)
class WeekSchedule:
    """Seven work days, Monday through Sunday."""

    week_number: int
    year: int
    days: tuple[WorkDay, ...]

    @property
    def free_days(self) -> list[WorkDay]:
        """Days that are not working days."""
        return [day for day in self.days if not day.is_working]
