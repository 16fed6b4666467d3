"""
Services package initialization.
"""

from weather_lookup.services.forecast_aggregator import aggregate_forecast
from weather_lookup.services.upstream_client import OpenWeatherClient
from weather_lookup.services.weather_service import WeatherService

__all__ = [
    "aggregate_forecast",
    "OpenWeatherClient",
    "WeatherService",
]
