"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters don't depend on application services
- The CLI runs without the web server
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library and other domain models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("home_dashboard.domain.models*")
        .should_not_import("home_dashboard.adapters*")
        .should_not_import("home_dashboard.application*")
        .should_not_import("home_dashboard.domain.contracts*")
        .should_not_import("home_dashboard.domain.ports*")
        .may_import("home_dashboard.domain.models*")
        .check("home_dashboard")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("home_dashboard.domain.ports*")
        .should_not_import("home_dashboard.adapters*")
        .should_not_import("home_dashboard.application*")
        .may_import("home_dashboard.domain*")
        .check("home_dashboard")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("home_dashboard.domain.contracts*")
        .should_not_import("home_dashboard.adapters*")
        .should_not_import("home_dashboard.application*")
        .may_import("home_dashboard.domain*")
        .check("home_dashboard")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("home_dashboard.application*")
        .should_not_import("home_dashboard.adapters*")
        .may_import("home_dashboard.domain*")
        .may_import("home_dashboard.application*")
        .check("home_dashboard")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("home_dashboard.adapters*")
        .should_not_import("home_dashboard.application*")
        .may_import("home_dashboard.domain*")
        .may_import("home_dashboard.adapters*")
        .check("home_dashboard", only_direct_imports=True)
    )


def test_cli_dont_import_web_adapters() -> None:
    """CLI should not import web adapters to allow running CLI without web server."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("home_dashboard.cli")
        .should_not_import("home_dashboard.adapters.web*")
        .check("home_dashboard")
    )
