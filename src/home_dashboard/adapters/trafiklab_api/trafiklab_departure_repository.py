"""Trafiklab departure repository adapter."""

import logging
from collections.abc import Sequence
from datetime import tzinfo

from home_dashboard.adapters.trafiklab_api.departure_parser import TrafiklabDepartureParser
from home_dashboard.adapters.trafiklab_api.http_client import TrafiklabHttpClient
from home_dashboard.domain.models.departure import Departure, dedupe_departures
from home_dashboard.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class TrafiklabDepartureRepository(DepartureRepository):
    """Departures for the commute lines from the Trafiklab Realtime API."""

    def __init__(
        self,
        http_client: TrafiklabHttpClient,
        timezone: tzinfo,
        relevant_lines: Sequence[str],
    ) -> None:
        """Initialize the repository.

        Args:
            http_client: Client for the Trafiklab Realtime API.
            timezone: Timezone of the upstream timestamps.
            relevant_lines: Line designations to keep, all others are dropped.
        """
        self._http_client = http_client
        self._parser = TrafiklabDepartureParser(timezone)
        self._relevant_lines = frozenset(relevant_lines)

    async def get_departures(self, stop_id: str, limit: int = 10) -> list[Departure]:
        """Get the next departures of the relevant lines at a stop.

        Args:
            stop_id: Trafiklab stop group id.
            limit: Maximum number of departures to return.

        Returns:
            Departures deduplicated on (realtime, destination, line), sorted by realtime.
        """
        raw_departures = await self._http_client.fetch_departures(stop_id)
        departures = self._parser.parse_departures(raw_departures)

        lines_found = sorted({d.line for d in departures})
        logger.debug(f"Lines at stop {stop_id}: {', '.join(lines_found) or 'none'}")

        relevant = [d for d in departures if d.line in self._relevant_lines]
        unique = dedupe_departures(relevant)
        if len(unique) != len(relevant):
            logger.debug(f"Deduplicated {len(relevant)} -> {len(unique)} departures")

        result = sorted(unique, key=lambda d: d.real_time)[:limit]
        logger.info(
            f"Stop {stop_id}: {len(raw_departures)} departures, "
            f"{len(relevant)} on lines {'/'.join(sorted(self._relevant_lines))}, "
            f"returning {len(result)}"
        )
        return result
