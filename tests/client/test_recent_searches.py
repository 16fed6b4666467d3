"""
Tests for recent search persistence.
"""

import json

import pytest

from weather_lookup.client.recent_searches import RecentSearches


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "state" / "recent_searches.json"


@pytest.fixture
def recent(store_path):
    return RecentSearches(path=store_path, max_entries=10)


class TestRecentSearches:
    """Test cases for RecentSearches."""

    def test_empty_when_nothing_stored(self, recent):
        assert recent.get() == []

    def test_add_puts_city_first(self, recent, store_path):
        """Test ordering and on-disk format."""
        recent.add("London")
        recent.add("Paris")

        assert recent.get() == ["Paris", "London"]
        assert json.loads(store_path.read_text()) == ["Paris", "London"]

    def test_case_insensitive_dedupe_keeps_latest_spelling(self, recent):
        """Test that re-adding a city moves it to the front without duplicates."""
        recent.add("london")
        recent.add("Paris")
        recent.add("LONDON")

        assert recent.get() == ["LONDON", "Paris"]

    def test_entries_trimmed(self, recent):
        recent.add("  Tokyo  ")

        assert recent.get() == ["Tokyo"]

    @pytest.mark.parametrize("city", [None, "", "   "])
    def test_blank_city_ignored(self, recent, store_path, city):
        """Test that blank input never touches storage."""
        assert recent.add(city) == []
        assert not store_path.exists()

    def test_bounded(self, store_path):
        """Test that the oldest entries fall off the end."""
        recent = RecentSearches(path=store_path, max_entries=3)
        for city in ["A", "B", "C", "D", "E"]:
            recent.add(city)

        assert recent.get() == ["E", "D", "C"]

    def test_default_bound_is_ten(self, store_path):
        recent = RecentSearches(path=store_path)
        for i in range(15):
            recent.add(f"City {i}")

        assert len(recent.get()) == 10
        assert recent.get()[0] == "City 14"

    @pytest.mark.parametrize("content", ["not json", '{"city": "London"}', "null"])
    def test_corrupt_storage_reads_as_empty(self, recent, store_path, content):
        """Test that unreadable storage is treated as empty."""
        store_path.parent.mkdir(parents=True)
        store_path.write_text(content)

        assert recent.get() == []

    def test_non_string_entries_dropped(self, recent, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps(["London", 42, None, "Paris"]))

        assert recent.get() == ["London", "Paris"]

    def test_corrupt_storage_overwritten_on_add(self, recent, store_path):
        """Test that adding after corruption starts a fresh list."""
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{{{")

        assert recent.add("Rome") == ["Rome"]
        assert recent.get() == ["Rome"]

    def test_write_failure_does_not_raise(self, tmp_path):
        """Test that an unwritable location only loses persistence."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        recent = RecentSearches(path=blocker / "recent_searches.json")

        assert recent.add("Berlin") == ["Berlin"]
        assert recent.get() == []

    def test_clear(self, recent, store_path):
        recent.add("London")
        recent.clear()

        assert recent.get() == []
        assert not store_path.exists()

    def test_clear_without_storage(self, recent):
        recent.clear()

        assert recent.get() == []
