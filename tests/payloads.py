"""
Builders for provider-shaped payloads used across the test suite.
"""

from datetime import datetime
from typing import Any, Dict, Optional


def make_sample(
    when: datetime,
    temp: Optional[float] = 20.0,
    temp_min: Optional[float] = None,
    temp_max: Optional[float] = None,
    condition: str = "Clear",
    icon: str = "01d",
    pop: Optional[float] = None,
    wind: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build one provider forecast entry (the shape of an item in "list").
    """
    sample: Dict[str, Any] = {
        "dt": int(when.timestamp()),
        "main": {
            "temp": temp,
            "temp_min": temp if temp_min is None else temp_min,
            "temp_max": temp if temp_max is None else temp_max,
        },
        "weather": [{"main": condition, "icon": icon, "description": condition.lower()}],
    }
    if pop is not None:
        sample["pop"] = pop
    if wind is not None:
        sample["wind"] = wind
    return sample


def current_weather_json(**overrides) -> Dict[str, Any]:
    """Backend response body for GET /weather."""
    body = {
        "city": "London",
        "country": "GB",
        "temperature": 15,
        "feelsLike": 13,
        "condition": "Clouds",
        "description": "broken clouds",
        "humidity": 82,
        "windSpeed": 4.1,
        "windDirection": 250,
        "icon": "04d",
        "units": "metric",
        "timestamp": "2024-05-01T12:00:00Z",
    }
    body.update(overrides)
    return body


def forecast_json() -> Dict[str, Any]:
    """Backend response body for GET /weather/forecast."""
    return {
        "hourly": [
            {
                "time": "2024-05-01T12:00:00Z",
                "temperature": 16,
                "condition": "Clouds",
                "icon": "04d",
                "precipitation": 20,
                "windSpeed": 3.5,
                "windDirection": 200,
            }
        ],
        "daily": [{"date": "2024-05-01", "min": 10, "max": 17, "condition": "Clouds", "icon": "04d"}],
    }
