from typing import Optional


class WeatherLookupException(Exception):
    """Base exception for the weather lookup service."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(WeatherLookupException):
    """Raised when a request parameter is missing or blank."""


class ConfigurationError(WeatherLookupException):
    """Raised when the upstream credential is not configured."""


class UpstreamError(WeatherLookupException):
    """Raised when the weather provider call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class WeatherClientError(WeatherLookupException):
    """Raised by the backend client when a lookup cannot be completed."""

    def __init__(
        self, message: str = "Failed to fetch weather data.", status_code: Optional[int] = None
    ):
        self.status_code = status_code
        super().__init__(message)
