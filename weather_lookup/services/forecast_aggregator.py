"""
Forecast aggregation.

Turns the provider's flat list of 3-hour samples into an hourly sequence and
one folded bucket per provider-local calendar day.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from weather_lookup.definitions.data_sources import MAX_DAILY_BUCKETS, MAX_HOURLY_SAMPLES
from weather_lookup.schemas.weather import DailyBucket, Forecast, HourlySample
from weather_lookup.utils.fields import Number, as_number, dig, round_half_up, within

# timezone() rejects offsets of a full day or more
_MAX_OFFSET_SECONDS = 24 * 3600 - 1


@dataclass
class _DayAccumulator:
    day: date
    low: Optional[Number]
    high: Optional[Number]
    condition: Optional[str]
    icon: Optional[str]

    def fold(self, low: Optional[Number], high: Optional[Number]) -> None:
        if low is not None and (self.low is None or low < self.low):
            self.low = low
        if high is not None and (self.high is None or high > self.high):
            self.high = high

    def to_bucket(self) -> DailyBucket:
        return DailyBucket(
            date=self.day,
            min=round_half_up(self.low),
            max=round_half_up(self.high),
            condition=self.condition,
            icon=self.icon,
        )


def aggregate_forecast(
    samples: Optional[Sequence[Dict[str, Any]]], utc_offset_seconds: Any = 0
) -> Forecast:
    """
    Build the hourly and daily forecast views from raw provider samples.

    Args:
        samples: The provider's "list" array; None is treated as empty
        utc_offset_seconds: Provider-local offset from UTC ("city.timezone")

    Returns:
        Forecast with at most 40 hourly samples and 14 daily buckets
    """
    samples = list(samples) if isinstance(samples, (list, tuple)) else []
    local_tz = _provider_timezone(utc_offset_seconds)
    return Forecast(
        hourly=build_hourly(samples),
        daily=build_daily(samples, utc_offset_seconds),
        utc_offset=int(local_tz.utcoffset(None).total_seconds()),
    )


def build_hourly(samples: Sequence[Dict[str, Any]]) -> List[HourlySample]:
    return [_to_hourly_sample(sample) for sample in samples[:MAX_HOURLY_SAMPLES]]


def build_daily(
    samples: Sequence[Dict[str, Any]], utc_offset_seconds: Any = 0
) -> List[DailyBucket]:
    """
    Fold every sample into its calendar-day bucket.

    The first sample of a day seeds the bucket's condition and icon; later
    samples only widen min/max. Rounding happens once the fold is complete.
    """
    local_tz = _provider_timezone(utc_offset_seconds)
    buckets: Dict[date, _DayAccumulator] = {}

    for sample in samples:
        instant = _sample_instant(sample)
        if instant is None:
            continue

        day = instant.astimezone(local_tz).date()
        low, high = _temperature_range(sample)

        bucket = buckets.get(day)
        if bucket is None:
            buckets[day] = _DayAccumulator(
                day=day,
                low=low,
                high=high,
                condition=dig(sample, "weather", 0, "main"),
                icon=dig(sample, "weather", 0, "icon"),
            )
        else:
            bucket.fold(low, high)

    ordered = sorted(buckets.values(), key=lambda b: b.day)[:MAX_DAILY_BUCKETS]
    return [bucket.to_bucket() for bucket in ordered]


def _to_hourly_sample(sample: Dict[str, Any]) -> HourlySample:
    pop = as_number(dig(sample, "pop"))
    return HourlySample(
        time=_sample_instant(sample),
        temperature=round_half_up(dig(sample, "main", "temp")),
        condition=dig(sample, "weather", 0, "main"),
        icon=dig(sample, "weather", 0, "icon"),
        precipitation=min(100, max(0, round_half_up(pop * 100))) if pop else 0,
        wind_speed=within(dig(sample, "wind", "speed"), low=0) or 0,
        wind_direction=within(dig(sample, "wind", "deg"), 0, 360) or 0,
    )


def _temperature_range(sample: Dict[str, Any]) -> Tuple[Optional[Number], Optional[Number]]:
    # min <= max even when the pair arrives swapped
    readings = [
        value
        for value in (
            as_number(dig(sample, "main", "temp_min")),
            as_number(dig(sample, "main", "temp_max")),
        )
        if value is not None
    ]
    if not readings:
        return None, None
    return min(readings), max(readings)


def _sample_instant(sample: Dict[str, Any]) -> Optional[datetime]:
    timestamp = as_number(dig(sample, "dt"))
    if timestamp is None:
        return None
    try:
        return datetime.fromtimestamp(timestamp, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def _provider_timezone(utc_offset_seconds: Any) -> timezone:
    offset = as_number(utc_offset_seconds)
    if offset is None or abs(offset) > _MAX_OFFSET_SECONDS:
        return UTC
    return timezone(timedelta(seconds=offset))
