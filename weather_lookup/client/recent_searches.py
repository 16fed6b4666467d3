"""
Persisted list of recently searched cities.
"""

import json
from pathlib import Path
from typing import List, Optional

from weather_lookup.config import get_settings
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


class RecentSearches:
    """
    Most-recent-first list of city searches stored as a JSON array.

    Entries are deduplicated case-insensitively and bounded in number.
    Storage failures are logged and otherwise ignored: recent searches are a
    convenience, never a reason to fail a lookup.
    """

    def __init__(self, path: Optional[Path] = None, max_entries: Optional[int] = None):
        self.path = Path(path or settings.recent_searches_path)
        self.max_entries = max_entries or settings.max_recent_searches

    def get(self) -> List[str]:
        try:
            stored = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning(
                "Could not read recent searches",
                extra={"event": "recent_searches_read_error", "path": str(self.path), "error": str(e)},
            )
            return []

        if not isinstance(stored, list):
            return []
        return [entry for entry in stored if isinstance(entry, str)]

    def add(self, city: Optional[str]) -> List[str]:
        """
        Put a city at the front of the list.

        Returns:
            The updated list (unchanged when city is blank)
        """
        if not city or not city.strip():
            return self.get()

        normalized = city.strip()
        remaining = [s for s in self.get() if s.lower() != normalized.lower()]
        updated = [normalized, *remaining][: self.max_entries]

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(updated), encoding="utf-8")
        except OSError as e:
            logger.warning(
                "Could not store recent searches",
                extra={"event": "recent_searches_write_error", "path": str(self.path), "error": str(e)},
            )
        return updated

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(
                "Could not clear recent searches",
                extra={"event": "recent_searches_clear_error", "path": str(self.path), "error": str(e)},
            )
