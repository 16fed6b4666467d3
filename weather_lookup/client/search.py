from typing import List, Sequence

from weather_lookup.definitions.data_sources import POPULAR_CITIES

SUGGESTIONS_WHEN_EMPTY = 5
MAX_SUGGESTIONS = 10


def filter_cities(query: str, cities: Sequence[str] = POPULAR_CITIES) -> List[str]:
    """
    Autocomplete suggestions: case-insensitive substring matches.

    A blank query suggests the first few popular cities.
    """
    if not query or not query.strip():
        return list(cities[:SUGGESTIONS_WHEN_EMPTY])

    needle = query.lower()
    return [city for city in cities if needle in city.lower()][:MAX_SUGGESTIONS]
