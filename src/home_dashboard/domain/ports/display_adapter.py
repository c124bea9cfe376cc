"""Display adapter port."""

from abc import ABC, abstractmethod


class DisplayAdapter(ABC):
    """Port for surfaces that serve the dashboard to users."""

    @abstractmethod
    async def start(self) -> None:
        """Start serving the dashboard."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop serving the dashboard."""
        ...
