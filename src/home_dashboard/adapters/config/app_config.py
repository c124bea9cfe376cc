"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from home_dashboard.domain.models.commute_configuration import CommuteConfiguration

# TOML sections and the settings they may override
TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "commute": (
        "home_stop_id",
        "home_stop_name",
        "city_stop_id",
        "city_stop_name",
        "relevant_lines",
        "city_bound_keywords",
        "home_bound_keywords",
        "departures_per_direction",
    ),
    "location": ("latitude", "longitude", "timezone"),
    "cache": (
        "weather_cache_seconds",
        "transport_cache_seconds",
        "garden_cache_seconds",
    ),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    title: str = Field(default="Hemmadashboard", description="Dashboard title")

    # Trafiklab Realtime API configuration
    trafiklab_api_key: str | None = Field(
        default=None, description="API key for the Trafiklab Realtime APIs"
    )
    trafiklab_api_timeout: int = Field(
        default=10, description="Timeout for Trafiklab API requests in seconds"
    )
    departures_limit: int = Field(
        default=10, description="Maximum number of departures kept per stop"
    )

    # Commute configuration
    home_stop_id: str = Field(default="740055002", description="Stop group id of the home stop")
    home_stop_name: str = Field(default="Klinga", description="Display name of the home stop")
    city_stop_id: str = Field(default="740011132", description="Stop group id of the city stop")
    city_stop_name: str = Field(default="Söder Tull", description="Display name of the city stop")
    relevant_lines: list[str] = Field(
        default=["480", "482", "486"], description="Lines serving the commute"
    )
    city_bound_keywords: list[str] = Field(
        default=["norrköping", "östra station", "söder tull"],
        description="Destination substrings of departures from home towards the city",
    )
    home_bound_keywords: list[str] = Field(
        default=["klinga", "skärblacka", "kimstad", "strömporten"],
        description="Destination substrings of departures from the city towards home",
    )
    departures_per_direction: int = Field(
        default=2, description="Departures shown per direction on the commute board"
    )

    # Weather location
    latitude: float = Field(default=58.5942, description="Latitude of the weather location")
    longitude: float = Field(default=16.1826, description="Longitude of the weather location")
    timezone: str = Field(
        default="Europe/Stockholm",
        description="Timezone for the dashboard clock (IANA timezone name)",
    )

    # Cache durations (daytime, six times longer at night)
    weather_cache_seconds: int = Field(default=10 * 60, description="Weather cache lifetime")
    transport_cache_seconds: int = Field(default=5 * 60, description="Departures cache lifetime")
    garden_cache_seconds: int = Field(default=30 * 60, description="Garden data cache lifetime")

    # Work schedule
    schedule_owner: str = Field(default="Olivia", description="Whose work schedule is shown")

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Optional TOML config file overriding the sections in TOML_SECTIONS
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        """Validate latitude is within range."""
        if not -90 <= v <= 90:
            raise ValueError("latitude must be between -90 and 90")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        """Validate longitude is within range."""
        if not -180 <= v <= 180:
            raise ValueError("longitude must be between -180 and 180")
        return v

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its overrides to this configuration.

        Returns:
            The parsed TOML data, or an empty dict when no config file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section_name, keys in TOML_SECTIONS.items():
            section = toml_data.get(section_name, {})
            if not isinstance(section, dict):
                raise ValueError(f"TOML config '{section_name}' must be a table")
            for key in keys:
                if key in section:
                    setattr(self, key, section[key])

        # Re-run validation for values that came from TOML
        self.validate_timezone(self.timezone)
        self.validate_latitude(self.latitude)
        self.validate_longitude(self.longitude)
        return toml_data

    @property
    def tz(self) -> ZoneInfo:
        """The configured timezone."""
        return ZoneInfo(self.timezone)

    def get_commute_config(self) -> CommuteConfiguration:
        """Build the commute configuration from these settings."""
        return CommuteConfiguration(
            home_stop_id=self.home_stop_id,
            home_stop_name=self.home_stop_name,
            city_stop_id=self.city_stop_id,
            city_stop_name=self.city_stop_name,
            relevant_lines=list(self.relevant_lines),
            city_bound_keywords=list(self.city_bound_keywords),
            home_bound_keywords=list(self.home_bound_keywords),
            departures_per_direction=self.departures_per_direction,
        )
