"""Travel time estimate between the two commute stops."""

from dataclasses import dataclass
from enum import Enum


class StopLabel(str, Enum):
    """The two stops of the commute."""

    HOME = "home"
    CITY = "city"

    @property
    def other(self) -> "StopLabel":
        """The stop at the other end of the commute."""
        return StopLabel.CITY if self is StopLabel.HOME else StopLabel.HOME


class TravelTimeSource(str, Enum):
    """Where a travel time estimate came from."""

    REAL = "real"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class TravelTimeEstimate:
    """Estimated travel time in whole minutes."""

    minutes: int
    source: TravelTimeSource
