"""Shared fixtures."""

import pytest
from dashboard_fakes import FakeDashboard


@pytest.fixture
def dashboard() -> FakeDashboard:
    return FakeDashboard()
