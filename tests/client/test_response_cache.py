"""
Tests for the client response cache.
"""

import pytest

from weather_lookup.client.cache import CacheKey, ResponseCache
from weather_lookup.schemas.weather import Forecast

KEY = CacheKey("forecast", "London", "metric")


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ResponseCache(ttl_seconds=300, clock=clock)


class TestResponseCache:
    """Test cases for ResponseCache."""

    def test_miss_on_empty(self, cache):
        assert cache.read(KEY) is None

    def test_hit_within_ttl(self, cache, clock):
        """Test that a fresh entry is returned unchanged."""
        payload = Forecast()
        cache.write(KEY, payload)
        clock.now += 299.9

        assert cache.read(KEY) is payload

    def test_expires_at_ttl(self, cache, clock):
        """Test that an entry is stale once its age reaches the TTL."""
        cache.write(KEY, Forecast())
        clock.now += 300

        assert cache.read(KEY) is None
        assert len(cache) == 0

    def test_expired_entry_only_evicted_on_read(self, cache, clock):
        """Test that staleness is checked lazily."""
        cache.write(KEY, Forecast())
        clock.now += 1000

        assert len(cache) == 1
        cache.read(KEY)
        assert len(cache) == 0

    def test_keys_differ_by_endpoint_city_and_units(self, cache):
        """Test that each component of the key separates entries."""
        cache.write(KEY, Forecast())

        assert cache.read(CacheKey("weather", "London", "metric")) is None
        assert cache.read(CacheKey("forecast", "Paris", "metric")) is None
        assert cache.read(CacheKey("forecast", "London", "imperial")) is None
        assert cache.read(KEY) is not None

    def test_write_refreshes_timestamp(self, cache, clock):
        """Test that overwriting an entry restarts its TTL."""
        cache.write(KEY, Forecast())
        clock.now += 200
        replacement = Forecast()
        cache.write(KEY, replacement)
        clock.now += 200

        assert cache.read(KEY) is replacement

    def test_clear(self, cache):
        cache.write(KEY, Forecast())
        cache.clear()

        assert len(cache) == 0
