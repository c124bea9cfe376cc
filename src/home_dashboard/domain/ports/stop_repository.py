"""Stop repository port."""

from typing import Protocol

from home_dashboard.domain.models.stop import StopGroup


class StopRepository(Protocol):
    """Port for looking up stops by name."""

    async def find_stop_groups(self, name: str) -> list[StopGroup]:
        """Find stop groups whose name matches the query."""
        ...

    async def find_stop_id(self, name: str) -> str | None:
        """Find the id of the first stop group whose name contains the query."""
        ...
