"""HTTP client for SMHI open data requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from home_dashboard.adapters.api_rate_limiter import ApiRateLimiter
from home_dashboard.adapters.api_request_logger import log_api_request
from home_dashboard.adapters.smhi_api.constants import (
    DEFAULT_HEADERS,
    SMHI_FORECAST_URL,
    SMHI_MIN_DELAY_SECONDS,
    SMHI_WARNINGS_URL,
)
from home_dashboard.adapters.smhi_api.errors import SmhiApiError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class SmhiHttpClient:
    """HTTP client for the SMHI point forecast and warnings APIs."""

    def __init__(self, session: "ClientSession", timeout: float = 10) -> None:
        """Initialize with a shared aiohttp session."""
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._rate_limiter: ApiRateLimiter | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.for_api("smhi", SMHI_MIN_DELAY_SECONDS)
        return self._rate_limiter

    async def fetch_forecast(self, latitude: float, longitude: float) -> dict[str, Any]:
        """Fetch the point forecast for a location.

        Coordinates are rounded to four decimals, which is what SMHI accepts.
        """
        url = SMHI_FORECAST_URL.format(
            longitude=round(longitude, 4), latitude=round(latitude, 4)
        )
        data = await self._get_json(url)
        if not isinstance(data, dict):
            raise SmhiApiError("Unexpected SMHI forecast format")
        return data

    async def fetch_warnings(self) -> dict[str, Any]:
        """Fetch all currently active weather warnings."""
        data = await self._get_json(SMHI_WARNINGS_URL)
        if not isinstance(data, dict):
            raise SmhiApiError("Unexpected SMHI warnings format")
        return data

    async def _get_json(self, url: str) -> Any:
        log_api_request("GET", url, headers=DEFAULT_HEADERS)

        rate_limiter = await self._get_rate_limiter()
        await rate_limiter.acquire()

        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(
                        f"SMHI returned status {response.status} for {url}: {error_text[:200]}"
                    )
                    raise SmhiApiError(f"SMHI API error: {response.status}", response.status)
                return await response.json(content_type=None)
        except TimeoutError as e:
            raise SmhiApiError(f"SMHI request timed out: {url}") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise SmhiApiError(f"Error calling SMHI: {e}") from e
