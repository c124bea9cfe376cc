"""Starlette JSON API serving the dashboard."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from home_dashboard.adapters.json_serializer import (
    commute_board_to_dict,
    departure_to_dict,
    to_jsonable,
    week_schedule_to_dict,
)
from home_dashboard.adapters.trafiklab_api.errors import (
    TrafiklabApiError,
    TrafiklabConfigurationError,
)
from home_dashboard.adapters.web.rate_limit_middleware import RateLimitMiddleware
from home_dashboard.domain.ports.display_adapter import DisplayAdapter

if TYPE_CHECKING:
    from home_dashboard.adapters.config import AppConfig
    from home_dashboard.domain.ports.dashboard_service import DashboardService

logger = logging.getLogger(__name__)

# Upstream statuses passed on to the client unchanged
PASSTHROUGH_STATUSES = frozenset({401, 403, 404, 429})
MAX_WEEK_NUMBER = 54


def trafiklab_error_response(error: TrafiklabApiError) -> JSONResponse:
    """Map a Trafiklab failure to an API response."""
    if isinstance(error, TrafiklabConfigurationError):
        return JSONResponse({"error": str(error)}, status_code=500)
    if error.status in PASSTHROUGH_STATUSES:
        return JSONResponse({"error": str(error)}, status_code=error.status)
    return JSONResponse({"error": str(error)}, status_code=502)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def create_app(dashboard: DashboardService, config: AppConfig) -> Starlette:
    """Build the dashboard API application.

    Args:
        dashboard: Service providing the dashboard data.
        config: Application configuration.

    Returns:
        The Starlette app, wrapped in per-client rate limiting.
    """

    async def departures(request: Request) -> Response:
        station_id = request.path_params["station_id"]
        try:
            result = await dashboard.get_station_departures(station_id)
        except TrafiklabApiError as e:
            logger.error(f"Departures for {station_id} failed: {e}")
            return trafiklab_error_response(e)
        return JSONResponse([departure_to_dict(d) for d in result])

    async def transport(_request: Request) -> Response:
        board = await dashboard.get_commute_board()
        return JSONResponse(commute_board_to_dict(board))

    async def weather(_request: Request) -> Response:
        report = await dashboard.get_weather()
        return JSONResponse(to_jsonable(report))

    async def garden(_request: Request) -> Response:
        report = await dashboard.get_garden()
        return JSONResponse(to_jsonable(report))

    async def schedule(request: Request) -> Response:
        week_param = request.query_params.get("week")
        year_param = request.query_params.get("year")
        owner = config.schedule_owner

        if week_param is None and year_param is None:
            current, upcoming = dashboard.get_schedules()
            return JSONResponse(
                {
                    "current": week_schedule_to_dict(current, owner),
                    "next": week_schedule_to_dict(upcoming, owner),
                }
            )

        week = _parse_int(week_param)
        year = _parse_int(year_param)
        if week is None or year is None or not 1 <= week <= MAX_WEEK_NUMBER:
            return JSONResponse(
                {"error": "Query parameters 'week' (1-54) and 'year' are required"},
                status_code=400,
            )
        try:
            result = dashboard.get_schedule(week, year)
        except (ValueError, OverflowError) as e:
            return JSONResponse({"error": f"Invalid week: {e}"}, status_code=400)
        return JSONResponse(week_schedule_to_dict(result, owner))

    async def stop_lookup(request: Request) -> Response:
        name = request.query_params.get("name") or request.query_params.get("q")
        if not name:
            return JSONResponse({"error": 'Query parameter "name" is required'}, status_code=400)
        try:
            groups = await dashboard.lookup_stops(name)
        except TrafiklabApiError as e:
            logger.error(f"Stop lookup for '{name}' failed: {e}")
            return trafiklab_error_response(e)
        return JSONResponse(to_jsonable(groups))

    async def healthz(_request: Any) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    routes = [
        Route("/api/departures/{station_id}", departures, methods=["GET"]),
        Route("/api/transport", transport, methods=["GET"]),
        Route("/api/weather", weather, methods=["GET"]),
        Route("/api/garden", garden, methods=["GET"]),
        Route("/api/schedule", schedule, methods=["GET"]),
        Route("/api/stop-lookup", stop_lookup, methods=["GET"]),
        Route("/healthz", healthz, methods=["GET"]),
    ]

    return Starlette(
        routes=routes,
        middleware=[
            Middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute)
        ],
    )


class StarletteWebAdapter(DisplayAdapter):
    """Serves the dashboard API with uvicorn."""

    def __init__(self, dashboard: DashboardService, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            dashboard: Service providing the dashboard data.
            config: Application configuration.
        """
        self.dashboard = dashboard
        self.config = config
        self._server: Any | None = None

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        import uvicorn

        app = create_app(self.dashboard, self.config)
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving {self.config.title} on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
