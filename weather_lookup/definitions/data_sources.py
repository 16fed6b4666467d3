"""
This module defines the constants and enumerations shared across the application.
"""

from enum import Enum
from typing import Literal, List

Units = Literal["metric", "imperial"]

# Provider horizon: 5 days of 3-hour samples
MAX_HOURLY_SAMPLES = 40
MAX_DAILY_BUCKETS = 14


class UnitSystem(str, Enum):
    """Unit systems understood by the weather provider."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def normalize(cls, value: str | None) -> "UnitSystem":
        """Anything other than the literal "imperial" is metric."""
        if value == cls.IMPERIAL.value:
            return cls.IMPERIAL
        return cls.METRIC

    @property
    def temperature_label(self) -> str:
        return "°F" if self is UnitSystem.IMPERIAL else "°C"

    @property
    def wind_label(self) -> str:
        return "mph" if self is UnitSystem.IMPERIAL else "km/h"


class Endpoint(str, Enum):
    """Logical backend endpoints, used as part of client cache keys."""

    WEATHER = "weather"
    FORECAST = "forecast"


class ForecastTab(str, Enum):
    """Metric plotted by the hourly trend graph."""

    TEMPERATURE = "Temperature"
    PRECIPITATION = "Precipitation"
    WIND = "Wind"


POPULAR_CITIES: List[str] = [
    "Manila",
    "Makati",
    "Quezon City",
    "Cebu City",
    "Davao City",
    "New York",
    "Los Angeles",
    "Chicago",
    "Houston",
    "Phoenix",
    "London",
    "Paris",
    "Tokyo",
    "Sydney",
    "Toronto",
    "Singapore",
    "Dubai",
    "Hong Kong",
    "Bangkok",
    "Seoul",
    "Berlin",
    "Rome",
    "Madrid",
    "Amsterdam",
    "Barcelona",
    "Mumbai",
    "Delhi",
    "Bangalore",
    "Jakarta",
    "Kuala Lumpur",
]
