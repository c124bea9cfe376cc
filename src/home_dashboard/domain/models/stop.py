"""Stop domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Stop:
    """A physical stop (platform or stop point)."""

    id: str
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class StopGroup:
    """A group of stops sharing one name, used as the departures lookup id."""

    id: str
    name: str
    area_type: str
    transport_modes: list[str] = field(default_factory=list)
    stops: list[Stop] = field(default_factory=list)
