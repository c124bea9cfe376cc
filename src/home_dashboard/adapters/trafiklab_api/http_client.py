"""HTTP client for Trafiklab Realtime API requests."""

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from home_dashboard.adapters.api_rate_limiter import ApiRateLimiter
from home_dashboard.adapters.api_request_logger import log_api_request
from home_dashboard.adapters.trafiklab_api.constants import (
    DEFAULT_HEADERS,
    TRAFIKLAB_DEPARTURES_URL,
    TRAFIKLAB_MIN_DELAY_SECONDS,
    TRAFIKLAB_STOP_LOOKUP_URL,
)
from home_dashboard.adapters.trafiklab_api.errors import (
    TrafiklabApiError,
    TrafiklabConfigurationError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class TrafiklabHttpClient:
    """HTTP client for the Trafiklab Realtime departures and stop lookup APIs."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str | None,
        timeout: float = 10,
    ) -> None:
        """Initialize with an aiohttp session and API key.

        Args:
            session: Shared aiohttp ClientSession.
            api_key: Trafiklab Realtime API key, None when not configured.
            timeout: Total request timeout in seconds.
        """
        self._session = session
        self._api_key = api_key
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._rate_limiter: ApiRateLimiter | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        """Get the shared rate limiter for the Trafiklab API."""
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.for_api(
                "trafiklab", TRAFIKLAB_MIN_DELAY_SECONDS
            )
        return self._rate_limiter

    async def fetch_departures(self, stop_id: str) -> list[dict[str, Any]]:
        """Fetch raw departures for a stop group.

        Args:
            stop_id: Trafiklab stop group id (e.g. "740055002").

        Returns:
            The ``departures`` list of the API response.
        """
        data = await self._get_json(f"{TRAFIKLAB_DEPARTURES_URL}/{quote(stop_id, safe='')}")
        departures = data.get("departures") or []
        logger.debug(f"Trafiklab returned {len(departures)} departures for stop {stop_id}")
        return departures

    async def search_stops(self, name: str) -> list[dict[str, Any]]:
        """Look up stop groups by name.

        Args:
            name: Stop name or part of it.

        Returns:
            The ``stop_groups`` list of the API response.
        """
        data = await self._get_json(f"{TRAFIKLAB_STOP_LOOKUP_URL}/{quote(name, safe='')}")
        stop_groups = data.get("stop_groups") or []
        logger.debug(f"Trafiklab stop lookup for '{name}' found {len(stop_groups)} groups")
        return stop_groups

    async def _get_json(self, url: str) -> dict[str, Any]:
        """GET a Trafiklab URL and decode the JSON object it returns.

        Raises:
            TrafiklabConfigurationError: If no API key is configured.
            TrafiklabApiError: On network errors, non-200 responses or invalid JSON.
        """
        if not self._api_key:
            raise TrafiklabConfigurationError()

        params = {"key": self._api_key}
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)

        rate_limiter = await self._get_rate_limiter()
        await rate_limiter.acquire()

        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, url)
        except TimeoutError as e:
            raise TrafiklabApiError(f"Trafiklab request timed out: {url}") from e
        except aiohttp.ClientError as e:
            raise TrafiklabApiError(f"Error calling Trafiklab: {e}") from e

    async def _handle_response(self, response: "ClientResponse", url: str) -> dict[str, Any]:
        if response.status != 200:
            error_text = await response.text()
            logger.error(
                f"Trafiklab API returned status {response.status} for {url}: {error_text[:200]}"
            )
            raise TrafiklabApiError(
                f"Trafiklab API failed: {response.status}", status=response.status
            )

        body = await response.text()
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise TrafiklabApiError(
                f"Invalid JSON from Trafiklab: {e}", status=response.status
            ) from e

        if not isinstance(data, dict):
            raise TrafiklabApiError(
                "Unexpected Trafiklab response format", status=response.status
            )
        return data
