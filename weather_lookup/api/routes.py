"""
This module defines the public HTTP routes.
"""

from datetime import datetime, UTC
from typing import Optional

from fastapi import APIRouter, Depends, Query

from weather_lookup.config import Settings, get_settings
from weather_lookup.schemas.common import ErrorResponse, HealthResponse
from weather_lookup.schemas.weather import CurrentWeather, Forecast
from weather_lookup.services.weather_service import WeatherService
from weather_lookup.utils.dependencies import get_weather_service
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(tags=["weather"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or blank city"},
    404: {"model": ErrorResponse, "description": "City unknown to the provider"},
    500: {"model": ErrorResponse, "description": "Credential not configured"},
    502: {"model": ErrorResponse, "description": "Provider unreachable or malformed"},
}


@router.get("/weather", response_model=CurrentWeather, responses=ERROR_RESPONSES)
async def get_weather(
    city: Optional[str] = Query(None, description="City name"),
    units: Optional[str] = Query(None, description="metric or imperial"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> CurrentWeather:
    """
    Get current conditions for a city.

    Unrecognized units fall back to metric.
    """
    return await weather_service.get_current_weather(city, units)


@router.get("/weather/forecast", response_model=Forecast, responses=ERROR_RESPONSES)
async def get_forecast(
    city: Optional[str] = Query(None, description="City name"),
    units: Optional[str] = Query(None, description="metric or imperial"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> Forecast:
    """
    Get the hourly (up to 40 three-hour samples) and daily (up to 14 days)
    forecast for a city.
    """
    return await weather_service.get_forecast(city, units)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint that returns service status.
    """
    credential_status = "configured" if settings.openweather_api_key else "missing"

    return HealthResponse(
        status="healthy" if settings.openweather_api_key else "degraded",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
        services={"openweather_credential": credential_status},
    )
