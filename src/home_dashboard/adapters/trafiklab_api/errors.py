"""Errors raised by the Trafiklab adapter."""


class TrafiklabApiError(Exception):
    """The Trafiklab API could not be reached or returned an error."""

    def __init__(self, message: str, status: int | None = None) -> None:
        """Initialize with a message and the upstream HTTP status, if any."""
        super().__init__(message)
        self.status = status


class TrafiklabConfigurationError(TrafiklabApiError):
    """No Trafiklab API key is configured."""

    def __init__(self, message: str = "Trafiklab API key not configured") -> None:
        super().__init__(message)
