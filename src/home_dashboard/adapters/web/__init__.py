"""Web adapter serving the dashboard JSON API."""

from home_dashboard.adapters.web.starlette_app import StarletteWebAdapter, create_app

__all__ = ["StarletteWebAdapter", "create_app"]
