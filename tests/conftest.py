"""
Common test fixtures and configuration.
"""

from datetime import datetime, UTC

import pytest

from tests.payloads import make_sample


@pytest.fixture
def current_payload():
    """Provider response for the current-weather endpoint."""
    return {
        "name": "London",
        "sys": {"country": "GB"},
        "main": {"temp": 14.5, "feels_like": 13.2, "humidity": 82},
        "weather": [{"main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "wind": {"speed": 4.1, "deg": 250},
    }


@pytest.fixture
def forecast_payload():
    """Provider response for the forecast endpoint: two days of samples."""
    samples = [
        make_sample(datetime(2024, 5, 1, hour, tzinfo=UTC), temp=12.0 + hour / 3, pop=0.25)
        for hour in range(0, 24, 3)
    ] + [
        make_sample(datetime(2024, 5, 2, hour, tzinfo=UTC), temp=18.0, condition="Rain", icon="10d")
        for hour in range(0, 24, 3)
    ]
    return {"cod": "200", "list": samples, "city": {"name": "London", "timezone": 0}}
