"""
This module provides weather-related services.
"""

from datetime import datetime, UTC
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from weather_lookup.definitions.data_sources import UnitSystem
from weather_lookup.exceptions import ConfigurationError, InvalidInputError, UpstreamError
from weather_lookup.schemas.weather import CurrentWeather, Forecast
from weather_lookup.services.forecast_aggregator import aggregate_forecast
from weather_lookup.services.upstream_client import OpenWeatherClient
from weather_lookup.utils.fields import dig, round_half_up, within
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherService:
    """
    Validates lookups, calls the weather provider once per request and
    reshapes the provider payload into stable response models.
    """

    def __init__(self, upstream: OpenWeatherClient, api_key: Optional[str]):
        """
        Initialize weather service with the provider client and credential.
        """
        self.upstream = upstream
        self.api_key = api_key

    async def get_current_weather(self, city: str, units: Optional[str] = None) -> CurrentWeather:
        """
        Get current conditions for a city.
        """
        city, unit_system = self._validate(city, units)
        data = await self.upstream.fetch_current(city, self.api_key, unit_system.value)

        try:
            return self._build_current_weather(data, unit_system)
        except ValidationError as e:
            self._log_malformed(city, "weather", e)
            raise UpstreamError("Malformed response from weather provider") from e

    async def get_forecast(self, city: str, units: Optional[str] = None) -> Forecast:
        """
        Get the hourly and daily forecast for a city.
        """
        city, unit_system = self._validate(city, units)
        data = await self.upstream.fetch_forecast(city, self.api_key, unit_system.value)

        try:
            forecast = aggregate_forecast(dig(data, "list"), dig(data, "city", "timezone"))
        except ValidationError as e:
            self._log_malformed(city, "forecast", e)
            raise UpstreamError("Malformed response from weather provider") from e

        logger.info(
            "Forecast aggregated",
            extra={
                "event": "forecast_aggregated",
                "city": city,
                "hourly_count": len(forecast.hourly),
                "daily_count": len(forecast.daily),
            },
        )
        return forecast

    def _validate(self, city: Optional[str], units: Optional[str]) -> Tuple[str, UnitSystem]:
        if city is None or not city.strip():
            raise InvalidInputError("city is required")
        if not self.api_key:
            logger.error(
                "Weather provider credential missing",
                extra={"event": "configuration_error", "setting": "OPENWEATHER_API_KEY"},
            )
            raise ConfigurationError("OPENWEATHER_API_KEY not set")
        return city.strip(), UnitSystem.normalize(units)

    @staticmethod
    def _build_current_weather(data: Dict[str, Any], unit_system: UnitSystem) -> CurrentWeather:
        return CurrentWeather(
            city=dig(data, "name"),
            country=dig(data, "sys", "country"),
            temperature=round_half_up(dig(data, "main", "temp")),
            feels_like=round_half_up(dig(data, "main", "feels_like")),
            condition=dig(data, "weather", 0, "main"),
            description=dig(data, "weather", 0, "description"),
            humidity=within(dig(data, "main", "humidity"), 0, 100),
            wind_speed=within(dig(data, "wind", "speed"), low=0),
            wind_direction=within(dig(data, "wind", "deg"), 0, 360),
            icon=dig(data, "weather", 0, "icon"),
            units=unit_system.value,
            timestamp=datetime.now(UTC),
        )

    @staticmethod
    def _log_malformed(city: str, endpoint: str, error: ValidationError) -> None:
        logger.error(
            "Provider payload failed validation",
            extra={
                "event": "upstream_malformed",
                "endpoint": endpoint,
                "city": city,
                "error": str(error),
            },
        )
