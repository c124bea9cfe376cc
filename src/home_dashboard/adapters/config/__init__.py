"""Configuration adapters."""

from home_dashboard.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
