from typing import Optional, Dict, Any

import httpx

from weather_lookup.config import get_settings
from weather_lookup.exceptions import UpstreamError
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


class OpenWeatherClient:
    """
    Thin async client for the OpenWeatherMap current and forecast endpoints.

    Returns the provider's raw JSON. Every failure surfaces as UpstreamError;
    no retry is attempted.
    """

    CURRENT_PATH = "weather"
    FORECAST_PATH = "forecast"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.openweather_base_url).rstrip("/")
        self.client = client or httpx.AsyncClient(
            timeout=timeout or settings.weather_api_timeout
        )

    async def close(self):
        await self.client.aclose()

    async def fetch_current(self, city: str, api_key: str, units: str) -> Dict[str, Any]:
        return await self._get(self.CURRENT_PATH, city, api_key, units)

    async def fetch_forecast(self, city: str, api_key: str, units: str) -> Dict[str, Any]:
        return await self._get(self.FORECAST_PATH, city, api_key, units)

    async def _get(self, path: str, city: str, api_key: str, units: str) -> Dict[str, Any]:
        logger.info(
            "Calling weather provider",
            extra={"event": "upstream_request", "endpoint": path, "city": city, "units": units},
        )
        try:
            response = await self.client.get(
                f"{self.base_url}/{path}",
                params={"q": city, "appid": api_key, "units": units},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            message = self._error_message(e.response)
            logger.warning(
                "Weather provider returned an error",
                extra={
                    "event": "upstream_error",
                    "endpoint": path,
                    "city": city,
                    "status_code": status_code,
                    "error": message,
                },
            )
            raise UpstreamError(message, status_code=status_code) from e
        except httpx.RequestError as e:
            logger.error(
                "Weather provider unreachable",
                extra={
                    "event": "upstream_unreachable",
                    "endpoint": path,
                    "city": city,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise UpstreamError(f"Weather provider unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                "Malformed response from weather provider",
                extra={"event": "upstream_malformed", "endpoint": path, "city": city},
            )
            raise UpstreamError("Malformed response from weather provider") from e

        if not isinstance(data, dict):
            raise UpstreamError("Malformed response from weather provider")

        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """
        Extract the provider's error message, e.g. {"cod": "404", "message": "city not found"}.
        """
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.text or response.reason_phrase or "Weather provider request failed"
