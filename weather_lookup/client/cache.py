"""
Time-bounded response cache for the backend client.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, NamedTuple, Optional, Union

from weather_lookup.config import get_settings
from weather_lookup.schemas.weather import CurrentWeather, Forecast

settings = get_settings()

Payload = Union[CurrentWeather, Forecast]


class CacheKey(NamedTuple):
    endpoint: str
    city: str
    units: str


@dataclass(frozen=True)
class CacheEntry:
    key: CacheKey
    payload: Payload
    stored_at: float


class ResponseCache:
    """
    Process-local cache of backend responses.

    Entries expire lazily: staleness is only checked, and the entry evicted,
    when it is read. There is no capacity bound; the cache lives as long as
    the client process.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = settings.client_cache_ttl if ttl_seconds is None else ttl_seconds
        self.clock = clock
        self.entries: Dict[CacheKey, CacheEntry] = {}

    def read(self, key: CacheKey) -> Optional[Payload]:
        """
        Return the cached payload, or None on a miss.

        An entry whose age has reached the TTL is discarded.
        """
        entry = self.entries.get(key)
        if entry is not None and self.clock() - entry.stored_at < self.ttl_seconds:
            return entry.payload

        self.entries.pop(key, None)
        return None

    def write(self, key: CacheKey, payload: Payload) -> None:
        self.entries[key] = CacheEntry(key=key, payload=payload, stored_at=self.clock())

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)
