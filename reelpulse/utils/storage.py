"""
Storage utility.

JSON-file key-value store for user preferences (e.g. preferred genre).
Analysis results are never persisted.
"""

import json
import os
import logging
from typing import Any, Dict, Optional

import config.settings as settings

logger = logging.getLogger(__name__)


class PreferenceStore:
    """
    Key-value store backed by a single JSON file.

    The analytics core never reads this store; callers read the preferred
    genre here and pass it in as a plain value.
    """

    def __init__(self, path: str):
        """
        Initialize preference store.

        Args:
            path: JSON file path (created on first write)
        """
        self.path = str(path)
        self._data = self._load()

        logger.info(f"Initialized PreferenceStore with path={self.path}")

    def _load(self) -> Dict[str, Any]:
        """Load stored preferences; missing or unreadable files load as empty."""
        if not os.path.exists(self.path):
            logger.debug(f"No preferences found at {self.path}")
            return {}

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load preferences from {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Ignoring preferences at {self.path}: expected a JSON object")
            return {}

        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Store a value and write the file immediately.

        Args:
            key: Preference name
            value: JSON-serializable value (None removes the key)
        """
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        try:
            with open(self.path, 'w') as f:
                json.dump(self._data, f, indent=2)
            logger.info(f"Saved preference '{key}' to {self.path}")
        except Exception as e:
            logger.error(f"Failed to save preference '{key}': {e}")
            raise

    @property
    def preferred_genre(self) -> Optional[str]:
        return self.get(settings.PREFERRED_GENRE_KEY) or None

    @preferred_genre.setter
    def preferred_genre(self, genre: Optional[str]) -> None:
        self.set(settings.PREFERRED_GENRE_KEY, genre or None)
