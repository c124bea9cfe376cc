"""Tests for the SMHI open data adapter."""

from datetime import UTC, datetime
from typing import Any

import pytest

from home_dashboard.adapters.api_rate_limiter import ApiRateLimiter
from home_dashboard.adapters.smhi_api import SmhiApiError, SmhiHttpClient, SmhiWeatherRepository
from home_dashboard.adapters.smhi_api.smhi_weather_repository import (
    parse_forecast,
    parse_warnings,
)

FORECAST = {
    "approvedTime": "2025-06-03T06:00:00Z",
    "timeSeries": [
        {
            "validTime": "2025-06-03T07:00:00Z",
            "parameters": [
                {"name": "t", "levelType": "hl", "level": 2, "unit": "Cel", "values": [14.3]},
                {"name": "r", "levelType": "hl", "level": 2, "unit": "percent", "values": [71]},
                {"name": "Wsymb2", "levelType": "hl", "unit": "category", "values": [3]},
                {"name": "tcc_mean", "levelType": "hl", "level": 0, "unit": "octas", "values": []},
            ],
        },
        {"validTime": "garbage", "parameters": []},
        {
            "validTime": "2025-06-03T08:00:00Z",
            "parameters": [{"name": "t", "values": [15]}],
        },
    ],
}

WARNINGS = {
    "alert": [
        {
            "identifier": "smhi-2025-0042",
            "info": [
                {
                    "headline": "Gult varning - Höga temperaturer",
                    "description": "Maxtemperaturer på 30 grader",
                    "severity": "Moderate",
                    "effective": "2025-06-03T00:00:00Z",
                    "expires": "2025-06-05T22:00:00Z",
                },
                {"headline": "Yellow warning - High temperatures", "severity": "MINOR"},
            ],
        }
    ]
}


class TestParseForecast:
    """Tests for parse_forecast."""

    def test_parses_time_steps_and_first_values(self) -> None:
        """Given a pmp3g response, when parsing, then each step maps parameter names to values."""
        points = parse_forecast(FORECAST)

        assert len(points) == 2
        assert points[0].valid_time == datetime(2025, 6, 3, 7, tzinfo=UTC)
        assert points[0].value("t") == 14.3
        assert points[0].value("r") == 71.0
        assert points[0].value("Wsymb2") == 3.0

    def test_parameters_without_values_are_missing(self) -> None:
        """Given a parameter with no values, when parsing, then it is absent."""
        points = parse_forecast(FORECAST)

        assert points[0].value("tcc_mean") is None
        assert points[1].value("r") is None

    def test_empty_response(self) -> None:
        """Given no time series, when parsing, then no points."""
        assert parse_forecast({}) == []


class TestParseWarnings:
    """Tests for parse_warnings."""

    def test_one_warning_per_info_block(self) -> None:
        """Given an alert with two info blocks, when parsing, then two warnings."""
        warnings = parse_warnings(WARNINGS)

        assert [w.id for w in warnings] == ["smhi-2025-0042", "smhi-2025-0042"]
        assert warnings[0].title == "Gult varning - Höga temperaturer"
        assert warnings[0].severity == "moderate"
        assert warnings[0].valid_from == datetime(2025, 6, 3, tzinfo=UTC)
        assert warnings[0].valid_to == datetime(2025, 6, 5, 22, tzinfo=UTC)

    def test_missing_validity_is_none(self) -> None:
        """Given an info block without effective and expires, when parsing, then both are None."""
        warning = parse_warnings(WARNINGS)[1]

        assert warning.severity == "minor"
        assert warning.valid_from is None
        assert warning.valid_to is None

    def test_no_alerts(self) -> None:
        """Given no active alerts, when parsing, then no warnings."""
        assert parse_warnings({"alert": []}) == []


class FakeResponse:
    """Minimal aiohttp response stand-in."""

    def __init__(self, status: int, data: Any) -> None:
        self.status = status
        self._data = data

    async def json(self, content_type: str | None = "application/json") -> Any:
        if isinstance(self._data, Exception):
            raise self._data
        return self._data

    async def text(self) -> str:
        return str(self._data)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *args: object) -> None:
        return None


class FakeSession:
    """Records requested URLs and answers with a fixed response."""

    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.urls: list[str] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.urls.append(url)
        return self.response


def make_client(session: FakeSession) -> SmhiHttpClient:
    client = SmhiHttpClient(session)  # type: ignore[arg-type]
    client._rate_limiter = ApiRateLimiter("smhi-test", min_delay_seconds=0.0)
    return client


class TestSmhiHttpClient:
    """Tests for SmhiHttpClient."""

    @pytest.mark.asyncio
    async def test_forecast_url_uses_rounded_coordinates(self) -> None:
        """Given precise coordinates, when fetching the forecast, then 4 decimals are used."""
        session = FakeSession(FakeResponse(200, FORECAST))

        await make_client(session).fetch_forecast(58.594212, 16.182634)

        assert "/lon/16.1826/lat/58.5942/" in session.urls[0]

    @pytest.mark.asyncio
    async def test_error_status_raises(self) -> None:
        """Given a 503 response, when fetching warnings, then SmhiApiError with the status."""
        session = FakeSession(FakeResponse(503, "unavailable"))

        with pytest.raises(SmhiApiError) as exc_info:
            await make_client(session).fetch_warnings()

        assert exc_info.value.status == 503

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self) -> None:
        """Given a body that is not JSON, when fetching, then SmhiApiError."""
        session = FakeSession(FakeResponse(200, ValueError("Expecting value")))

        with pytest.raises(SmhiApiError):
            await make_client(session).fetch_warnings()

    @pytest.mark.asyncio
    async def test_repository_parses_client_data(self) -> None:
        """Given a working client, when getting warnings through the repository, then parsed."""
        repository = SmhiWeatherRepository(make_client(FakeSession(FakeResponse(200, WARNINGS))))

        warnings = await repository.get_warnings()

        assert len(warnings) == 2
