"""
Async client for the weather lookup backend.
"""

import asyncio
from typing import Dict, Optional, Tuple, Type, TypeVar

import httpx

from weather_lookup.client.cache import CacheKey, Payload, ResponseCache
from weather_lookup.config import get_settings
from weather_lookup.definitions.data_sources import Endpoint
from weather_lookup.exceptions import WeatherClientError
from weather_lookup.schemas.weather import CurrentWeather, Forecast
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

P = TypeVar("P", CurrentWeather, Forecast)


class WeatherAPIClient:
    """
    Fetches current weather and forecasts from the backend.

    Responses are memoized in a ResponseCache. Concurrent misses for the same
    key share one backend call.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        cache: Optional[ResponseCache] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.cache = cache if cache is not None else ResponseCache()
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout or settings.weather_api_timeout
        )
        self._in_flight: Dict[CacheKey, asyncio.Future] = {}

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self) -> "WeatherAPIClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def get_weather(self, city: str, units: str = "metric") -> CurrentWeather:
        key = CacheKey(Endpoint.WEATHER.value, city, units)
        return await self._get_cached(key, "/weather", CurrentWeather)

    async def get_forecast(self, city: str, units: str = "metric") -> Forecast:
        key = CacheKey(Endpoint.FORECAST.value, city, units)
        return await self._get_cached(key, "/weather/forecast", Forecast)

    async def get_weather_and_forecast(
        self, city: str, units: str = "metric"
    ) -> Tuple[CurrentWeather, Forecast]:
        """
        Fetch both payloads concurrently; either failure fails the whole lookup.
        """
        weather, forecast = await asyncio.gather(
            self.get_weather(city, units), self.get_forecast(city, units)
        )
        return weather, forecast

    async def _get_cached(self, key: CacheKey, path: str, model: Type[P]) -> P:
        cached = self.cache.read(key)
        if cached is not None:
            logger.debug("Cache hit", extra={"event": "cache_hit", **key._asdict()})
            return cached

        pending = self._in_flight.get(key)
        if pending is None:
            logger.debug("Cache miss", extra={"event": "cache_miss", **key._asdict()})
            pending = asyncio.ensure_future(self._fetch(key, path, model))
            self._in_flight[key] = pending
            pending.add_done_callback(lambda _: self._in_flight.pop(key, None))

        return await asyncio.shield(pending)

    async def _fetch(self, key: CacheKey, path: str, model: Type[P]) -> P:
        try:
            response = await self.client.get(path, params={"city": key.city, "units": key.units})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = self._server_message(e.response)
            logger.warning(
                "Backend returned an error",
                extra={
                    "event": "backend_error",
                    "path": path,
                    "status_code": e.response.status_code,
                    "error": message,
                },
            )
            raise WeatherClientError(message, status_code=e.response.status_code) from e
        except httpx.RequestError as e:
            logger.error(
                "Backend unreachable",
                extra={"event": "backend_unreachable", "path": path, "error": str(e)},
            )
            raise WeatherClientError() from e

        try:
            payload: Payload = model.model_validate(response.json())
        except ValueError as e:
            logger.error(
                "Backend returned an unexpected payload",
                extra={"event": "backend_malformed", "path": path, "error": str(e)},
            )
            raise WeatherClientError() from e

        self.cache.write(key, payload)
        return payload

    @staticmethod
    def _server_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            for field in ("error", "message"):
                if isinstance(body.get(field), str) and body[field]:
                    return body[field]
        return WeatherClientError().message
