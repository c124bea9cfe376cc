"""Errors raised by the SMHI adapter."""


class SmhiApiError(Exception):
    """SMHI could not be reached or returned an error."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
