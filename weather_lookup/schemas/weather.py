"""
This module defines the weather payloads returned by the API.

Field names are snake_case in Python and camelCase on the wire.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_lookup.definitions.data_sources import Units
from weather_lookup.utils.fields import Number


class WeatherModel(BaseModel):
    """
    Base model for immutable, alias-serialized weather payloads.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class CurrentWeather(WeatherModel):
    """
    Current conditions for a city.

    Every provider-derived field is optional: a field the provider omits is
    reported as absent instead of failing the request.
    """

    city: Optional[str] = Field(None, description="City name as resolved by the provider")
    country: Optional[str] = Field(None, description="ISO country code")
    temperature: Optional[int] = Field(None, description="Rounded temperature")
    feels_like: Optional[int] = Field(
        None, alias="feelsLike", description="Rounded feels-like temperature"
    )
    condition: Optional[str] = Field(None, description="Short condition label")
    description: Optional[str] = Field(None, description="Free text description")
    humidity: Optional[Number] = Field(
        None, ge=0, le=100, description="Humidity percentage"
    )
    wind_speed: Optional[Number] = Field(
        None, alias="windSpeed", ge=0, description="Wind speed"
    )
    wind_direction: Optional[Number] = Field(
        None, alias="windDirection", ge=0, le=360, description="Wind direction in degrees"
    )
    icon: Optional[str] = Field(None, description="Provider icon code")
    units: Units = Field(..., description="Unit system of the values")
    timestamp: datetime.datetime = Field(..., description="Instant the response was built")


class HourlySample(WeatherModel):
    """One 3-hour forecast sample."""

    time: Optional[datetime.datetime] = Field(None, description="Sample instant (UTC)")
    temperature: Optional[int] = Field(None, description="Rounded temperature")
    condition: Optional[str] = Field(None, description="Short condition label")
    icon: Optional[str] = Field(None, description="Provider icon code")
    precipitation: int = Field(
        0, ge=0, le=100, description="Precipitation probability in percent"
    )
    wind_speed: Number = Field(0, alias="windSpeed", ge=0, description="Wind speed")
    wind_direction: Optional[Number] = Field(
        0, alias="windDirection", description="Wind direction in degrees"
    )


class DailyBucket(WeatherModel):
    """Samples of one provider-local calendar day folded together."""

    date: datetime.date = Field(..., description="Provider-local calendar day")
    min: Optional[int] = Field(None, description="Lowest temperature of the day")
    max: Optional[int] = Field(None, description="Highest temperature of the day")
    condition: Optional[str] = Field(None, description="Condition of the first sample")
    icon: Optional[str] = Field(None, description="Icon of the first sample")


class Forecast(WeatherModel):
    """Hourly and daily views of one upstream forecast."""

    hourly: List[HourlySample] = Field(default_factory=list)
    daily: List[DailyBucket] = Field(default_factory=list)
    utc_offset: int = Field(
        0,
        alias="utcOffset",
        ge=-86399,
        le=86399,
        description="Seconds east of UTC of the zone the daily buckets are dated in",
    )
