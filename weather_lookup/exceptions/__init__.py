"""Weather lookup exceptions."""

from .common import (
    WeatherLookupException,
    InvalidInputError,
    ConfigurationError,
    UpstreamError,
    WeatherClientError,
)

__all__ = [
    "WeatherLookupException",
    "InvalidInputError",
    "ConfigurationError",
    "UpstreamError",
    "WeatherClientError",
]
