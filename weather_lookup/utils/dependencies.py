"""
FastAPI dependency injection providers.
"""

from fastapi import Depends, Request

from weather_lookup.config import Settings, get_settings
from weather_lookup.services.upstream_client import OpenWeatherClient
from weather_lookup.services.weather_service import WeatherService


def get_upstream_client(request: Request) -> OpenWeatherClient:
    """
    Provide the provider client created during application startup.

    Args:
        request: Incoming request, used to reach application state

    Returns:
        OpenWeatherClient: Shared provider client
    """
    return request.app.state.upstream_client


def get_weather_service(
    upstream: OpenWeatherClient = Depends(get_upstream_client),
    settings: Settings = Depends(get_settings),
) -> WeatherService:
    """
    Provide a weather service bound to the configured credential.

    The credential is looked up per request so a missing key is reported as
    a configuration error rather than preventing startup.

    Args:
        upstream: Provider client from dependency
        settings: Application settings from dependency

    Returns:
        WeatherService: Configured weather service
    """
    return WeatherService(upstream=upstream, api_key=settings.openweather_api_key)
