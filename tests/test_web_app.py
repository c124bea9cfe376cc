"""Tests for the dashboard JSON API."""

import pytest
from starlette.testclient import TestClient

from home_dashboard.adapters.config import AppConfig
from home_dashboard.adapters.trafiklab_api import TrafiklabApiError, TrafiklabConfigurationError
from home_dashboard.adapters.web import create_app


@pytest.fixture
def client(dashboard) -> TestClient:
    return TestClient(create_app(dashboard, AppConfig(schedule_owner="Olivia")))


class TestDepartureEndpoints:
    """Tests for /api/departures and /api/transport."""

    def test_station_departures(self, client: TestClient) -> None:
        """Given departures for a stop, when requesting them, then JSON with delay minutes."""
        response = client.get("/api/departures/740055002")

        assert response.status_code == 200
        data = response.json()
        assert [d["trip_id"] for d in data] == ["t1", "t2"]
        assert data[0]["delay_minutes"] == 0
        assert data[0]["real_time"] == "2025-06-03T08:03:00+02:00"

    def test_transport_board(self, client: TestClient) -> None:
        """Given a commute board, when requesting transport, then entries carry computed fields."""
        response = client.get("/api/transport")

        assert response.status_code == 200
        data = response.json()
        entry = data["from_home"][0]
        assert entry["from_stop"] == "home"
        assert entry["has_left"] is False
        assert entry["travel_minutes"] == 14
        assert entry["departure"]["delay_minutes"] == 4
        assert data["from_city"] == []
        assert data["warnings"] == ["Linje 480 är 4 min försenad"]
        assert data["error"] is None

    @pytest.mark.parametrize(
        "error,expected_status",
        [
            (TrafiklabConfigurationError(), 500),
            (TrafiklabApiError("Trafiklab API failed: 404", status=404), 404),
            (TrafiklabApiError("Trafiklab API failed: 429", status=429), 429),
            (TrafiklabApiError("Trafiklab API failed: 503", status=503), 502),
            (TrafiklabApiError("Error calling Trafiklab: refused"), 502),
        ],
    )
    def test_upstream_errors_are_mapped(
        self, dashboard, client: TestClient, error: TrafiklabApiError, expected_status: int
    ) -> None:
        """Given a failing upstream, when requesting departures, then the status is mapped."""
        dashboard.error = error

        response = client.get("/api/departures/740055002")

        assert response.status_code == expected_status
        assert response.json() == {"error": str(error)}


class TestWeatherAndGarden:
    """Tests for /api/weather and /api/garden."""

    def test_weather(self, client: TestClient) -> None:
        """Given a weather report, when requesting weather, then JSON with forecast days."""
        response = client.get("/api/weather")

        assert response.status_code == 200
        data = response.json()
        assert data["current"]["temperature"] == 8
        assert len(data["forecast"]) == 7
        assert data["forecast"][0]["date"] == "2025-06-03"
        assert data["is_fallback"] is True

    def test_garden(self, client: TestClient) -> None:
        """Given a garden report, when requesting garden, then JSON with advice."""
        response = client.get("/api/garden")

        assert response.status_code == 200
        data = response.json()
        assert data["air_temperature"] == {"current": 8.0, "min": 4.0, "max": 12.0}
        assert data["last_frost_date"] == "2025-04-20"
        assert data["seasonal_tips"]


class TestScheduleEndpoint:
    """Tests for /api/schedule."""

    def test_current_and_next_week(self, client: TestClient) -> None:
        """Given no parameters, when requesting the schedule, then this and next week."""
        response = client.get("/api/schedule")

        assert response.status_code == 200
        data = response.json()
        assert data["current"]["week_number"] == 23
        assert data["next"]["week_number"] == 24
        assert data["current"]["owner"] == "Olivia"

    def test_specific_week(self, client: TestClient) -> None:
        """Given week and year, when requesting the schedule, then that week with free days."""
        response = client.get("/api/schedule", params={"week": 23, "year": 2025})

        assert response.status_code == 200
        data = response.json()
        assert data["days"][0]["calendar_date"] == "2025-06-02"
        assert data["days"][1]["is_today"] is True
        assert data["free_days"] == ["Friday", "Saturday", "Sunday"]

    @pytest.mark.parametrize(
        "params",
        [{"week": "23"}, {"year": "2025"}, {"week": "x", "year": "2025"},
         {"week": "0", "year": "2025"}, {"week": "55", "year": "2025"}],
    )
    def test_invalid_parameters(self, client: TestClient, params: dict[str, str]) -> None:
        """Given missing or invalid parameters, when requesting the schedule, then 400."""
        response = client.get("/api/schedule", params=params)

        assert response.status_code == 400
        assert "error" in response.json()


class TestStopLookup:
    """Tests for /api/stop-lookup."""

    @pytest.mark.parametrize("param", ["name", "q"])
    def test_lookup_by_name(self, dashboard, client: TestClient, param: str) -> None:
        """Given a name, when looking up stops, then the stop groups are returned."""
        response = client.get("/api/stop-lookup", params={param: "Söder Tull"})

        assert response.status_code == 200
        assert response.json()[0]["id"] == "740011132"
        assert response.json()[0]["stops"][0]["latitude"] == 58.585
        assert dashboard.lookups == ["Söder Tull"]

    def test_missing_name(self, client: TestClient) -> None:
        """Given no name, when looking up stops, then 400."""
        response = client.get("/api/stop-lookup")

        assert response.status_code == 400

    def test_missing_api_key(self, dashboard, client: TestClient) -> None:
        """Given no API key, when looking up stops, then 500 with the reason."""
        dashboard.error = TrafiklabConfigurationError()

        response = client.get("/api/stop-lookup", params={"name": "Klinga"})

        assert response.status_code == 500
        assert response.json() == {"error": "Trafiklab API key not configured"}


class TestHealthAndRateLimit:
    """Tests for /healthz and per-client rate limiting."""

    def test_healthz(self, client: TestClient) -> None:
        """Given a running app, when checking health, then Ok."""
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.text == "Ok"

    def test_rate_limit(self, dashboard) -> None:
        """Given a small quota, when exceeding it, then 429 with Retry-After."""
        client = TestClient(create_app(dashboard, AppConfig(rate_limit_per_minute=2)))

        statuses = [client.get("/api/transport").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]
        assert client.get("/healthz").status_code == 200
