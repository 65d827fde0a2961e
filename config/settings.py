"""
Configuration settings for ReelPulse.

Centralized configuration for the analytics core, ingestion and CLI.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"

# Preference store (preferred genre lives here, never in the core)
PREFERENCES_PATH = Path(
    os.getenv("REELPULSE_PREFERENCES", str(DATA_ROOT / "preferences.json"))
)
PREFERRED_GENRE_KEY = "preferred_genre"

# Keyword extraction
KEYWORD_LIMIT = 3  # Top keywords kept per movie
MIN_KEYWORD_LENGTH = 4  # Tokens shorter than this are dropped

# Aggregation
POSITIVE_RATING_THRESHOLD = 4  # rating >= threshold counts as positive
UNKNOWN_GENRE = "Unknown"  # Used when the first record has no genre

# Ingestion
REQUIRED_COLUMNS = ["Movie", "Review", "Rating", "Genre"]
MIN_RATING_EXCLUSIVE = 0
MAX_RATING = 5
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB

# CLI
DEFAULT_TOP_MOVIES = 10

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "reelpulse.log"
