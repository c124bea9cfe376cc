"""Tests for wiring the dashboard service."""

import logging
from unittest.mock import MagicMock

import pytest

from home_dashboard.adapters.config import AppConfig
from home_dashboard.application.services import HomeDashboardService
from home_dashboard.bootstrap import build_dashboard_service


def test_builds_dashboard_service() -> None:
    """Given a config with an API key, when wiring, then a dashboard service is returned."""
    dashboard = build_dashboard_service(AppConfig(trafiklab_api_key="key"), MagicMock())

    assert isinstance(dashboard, HomeDashboardService)


def test_warns_without_api_key(caplog: pytest.LogCaptureFixture) -> None:
    """Given no API key, when wiring, then a warning is logged."""
    with caplog.at_level(logging.WARNING):
        build_dashboard_service(AppConfig(trafiklab_api_key=None), MagicMock())

    assert "TRAFIKLAB_API_KEY is not set" in caplog.text
