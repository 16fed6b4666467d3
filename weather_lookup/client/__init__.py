"""
Client for the weather lookup backend.
"""

from weather_lookup.client.api import WeatherAPIClient
from weather_lookup.client.cache import CacheKey, ResponseCache
from weather_lookup.client.recent_searches import RecentSearches
from weather_lookup.client.search import filter_cities

__all__ = [
    "WeatherAPIClient",
    "CacheKey",
    "ResponseCache",
    "RecentSearches",
    "filter_cities",
]
