"""Trafiklab stop lookup repository adapter."""

import logging
from typing import Any

from home_dashboard.adapters.trafiklab_api.http_client import TrafiklabHttpClient
from home_dashboard.domain.models.stop import Stop, StopGroup
from home_dashboard.domain.ports.stop_repository import StopRepository

logger = logging.getLogger(__name__)


class TrafiklabStopRepository(StopRepository):
    """Finds Trafiklab stop groups by name."""

    def __init__(self, http_client: TrafiklabHttpClient) -> None:
        """Initialize with a Trafiklab HTTP client."""
        self._http_client = http_client
        self._stop_id_cache: dict[str, str] = {}

    async def find_stop_groups(self, name: str) -> list[StopGroup]:
        """Find stop groups whose name matches the query."""
        raw_groups = await self._http_client.search_stops(name)
        groups = [group for raw in raw_groups if (group := self._parse_stop_group(raw))]
        for group in groups:
            logger.debug(
                f"Stop group {group.name} ({group.id}), {group.area_type}, "
                f"modes {group.transport_modes}, {len(group.stops)} stops"
            )
        return groups

    async def find_stop_id(self, name: str) -> str | None:
        """Find the id of the first stop group whose name contains the query.

        Found ids are remembered for the lifetime of the repository.
        """
        key = name.lower()
        if key in self._stop_id_cache:
            return self._stop_id_cache[key]

        groups = await self.find_stop_groups(name)
        for group in groups:
            if key in group.name.lower():
                logger.info(f"Resolved stop '{name}' to {group.name} ({group.id})")
                self._stop_id_cache[key] = group.id
                return group.id

        logger.warning(f"No stop group found for '{name}'")
        return None

    @staticmethod
    def _parse_stop_group(raw: dict[str, Any]) -> StopGroup | None:
        group_id = raw.get("id")
        if not group_id:
            logger.warning(f"Skipping stop group without id: {raw!r:.200}")
            return None

        stops = []
        for stop in raw.get("stops") or []:
            if not stop.get("id"):
                continue
            stops.append(
                Stop(
                    id=str(stop["id"]),
                    name=stop.get("name", ""),
                    latitude=float(stop.get("lat") or 0.0),
                    longitude=float(stop.get("lon") or 0.0),
                )
            )

        return StopGroup(
            id=str(group_id),
            name=raw.get("name", ""),
            area_type=raw.get("area_type", ""),
            transport_modes=list(raw.get("transport_modes") or []),
            stops=stops,
        )
