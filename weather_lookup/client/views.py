"""
Presentation logic for the client: day selection, trend series and
display formatting. Rendering itself lives in the CLI.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import List, Optional, Sequence

from weather_lookup.definitions.data_sources import ForecastTab, UnitSystem
from weather_lookup.exceptions import InvalidInputError
from weather_lookup.schemas.weather import CurrentWeather, Forecast, HourlySample
from weather_lookup.utils.fields import round_half_up

HOURS_SHOWN = 24
SPARK_BLOCKS = "▁▂▃▄▅▆▇█"


@dataclass(frozen=True)
class DayView:
    """Hourly samples and headline conditions for the selected day."""

    index: int
    hourly: List[HourlySample]
    weather: CurrentWeather


@dataclass(frozen=True)
class TrendPoint:
    time: Optional[datetime]
    value: float
    label: str


def forecast_timezone(forecast: Forecast) -> timezone:
    """Zone the daily buckets of a forecast are dated in."""
    return timezone(timedelta(seconds=forecast.utc_offset))


def select_day(forecast: Forecast, current: CurrentWeather, index: int) -> DayView:
    """
    Build the view for the daily bucket at index.

    Day 0 shows the next 24 hours and the live conditions. Any other day
    shows the samples dated that day in the forecast's own zone and
    conditions averaged over them, or the min/max midpoint when the day has
    no samples.
    """
    if index == 0:
        return DayView(index=0, hourly=forecast.hourly[:HOURS_SHOWN], weather=current)

    if not 0 < index < len(forecast.daily):
        raise InvalidInputError(f"day index {index} is out of range")

    day = forecast.daily[index]
    tz = forecast_timezone(forecast)
    hours = [h for h in forecast.hourly if _local_date(h.time, tz) == day.date]

    if hours:
        temperatures = [h.temperature for h in hours if h.temperature is not None]
        avg_temp = _average(temperatures)
        weather = current.model_copy(
            update={
                "temperature": avg_temp,
                "feels_like": avg_temp,
                "condition": day.condition,
                "icon": day.icon,
                "wind_speed": sum(h.wind_speed for h in hours) / len(hours),
            }
        )
        return DayView(index=index, hourly=hours[:HOURS_SHOWN], weather=weather)

    midpoint = None
    if day.min is not None and day.max is not None:
        midpoint = round_half_up((day.max + day.min) / 2)
    weather = current.model_copy(
        update={
            "temperature": midpoint,
            "feels_like": midpoint,
            "condition": day.condition,
            "icon": day.icon,
        }
    )
    return DayView(index=index, hourly=[], weather=weather)


def trend_series(
    hours: Sequence[HourlySample], tab: ForecastTab, units: UnitSystem
) -> List[TrendPoint]:
    """Points for the hourly graph of the chosen metric."""
    points = []
    for hour in hours[:HOURS_SHOWN]:
        if tab is ForecastTab.TEMPERATURE:
            if hour.temperature is None:
                continue
            points.append(
                TrendPoint(hour.time, hour.temperature, f"{hour.temperature}{units.temperature_label}")
            )
        elif tab is ForecastTab.PRECIPITATION:
            points.append(TrendPoint(hour.time, hour.precipitation, f"{hour.precipitation}%"))
        else:
            points.append(
                TrendPoint(
                    hour.time,
                    hour.wind_speed,
                    f"{round_half_up(hour.wind_speed)} {units.wind_label}",
                )
            )
    return points


def sparkline(values: Sequence[float]) -> str:
    """Scale values between their min and max onto block characters."""
    if not values:
        return ""
    low, high = min(values), max(values)
    span = (high - low) or 1
    top = len(SPARK_BLOCKS) - 1
    return "".join(SPARK_BLOCKS[round((v - low) / span * top)] for v in values)


def format_hour(moment: Optional[datetime], tz: Optional[tzinfo] = None) -> str:
    """'3 PM' style label."""
    if moment is None:
        return "--"
    local = moment.astimezone(tz)
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{local.hour % 12 or 12} {suffix}"


def format_weekday(day: date) -> str:
    return day.strftime("%a")


def format_full_date(day: date) -> str:
    """'Monday, Jan 5' style label."""
    return f"{day.strftime('%A, %b')} {day.day}"


def format_temperature(value: Optional[int], units: UnitSystem) -> str:
    if value is None:
        return "--"
    return f"{value}{units.temperature_label}"


def _local_date(moment: Optional[datetime], tz: Optional[tzinfo]) -> Optional[date]:
    if moment is None:
        return None
    return moment.astimezone(tz).date()


def _average(values: Sequence[float]) -> Optional[int]:
    if not values:
        return None
    return round_half_up(sum(values) / len(values))
