"""Ports (interfaces) for the ports-and-adapters architecture."""

from home_dashboard.domain.ports.dashboard_service import DashboardService
from home_dashboard.domain.ports.departure_repository import DepartureRepository
from home_dashboard.domain.ports.display_adapter import DisplayAdapter
from home_dashboard.domain.ports.stop_repository import StopRepository
from home_dashboard.domain.ports.weather_repository import WeatherRepository

__all__ = [
    "DashboardService",
    "DepartureRepository",
    "DisplayAdapter",
    "StopRepository",
    "WeatherRepository",
]
