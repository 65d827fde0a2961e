"""
CSV Ingestion Agent.

Loads uploaded review CSV files and converts rows into ReviewRecord objects.
Invalid rows are dropped here so the analytics core only sees clean records.
"""

import logging
import os
import re
from typing import List, Optional

import pandas as pd

from reelpulse.models.review import ReviewRecord
import config.settings as settings

logger = logging.getLogger(__name__)


# Leading numeric prefix, so "4.5 stars" parses as 4.5
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class IngestionError(ValueError):
    """Raised when an uploaded file cannot be turned into review records."""


def parse_rating(raw) -> float:
    """
    Parse a rating cell leniently.

    Reads the leading number of the text ("4.5/5" -> 4.5). Anything
    without a leading number parses as 0, which the row filter rejects.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        return 0.0 if pd.isna(raw) else float(raw)

    match = _NUMBER_PREFIX.match(str(raw))
    if not match:
        return 0.0
    return float(match.group(1))


def _clean_text(raw) -> str:
    """Trim a text cell; missing cells become empty strings."""
    if not isinstance(raw, str):
        return ""
    return raw.strip()


class CSVIngestionAgent:
    """
    Reads review data from CSV files.

    Expected header: Movie, Review, Rating, Genre (extra columns ignored).
    Rows are kept only if movie, review and genre are non-empty and the
    rating lies in (0, 5].
    """

    def __init__(
        self,
        required_columns: Optional[List[str]] = None,
        max_upload_bytes: int = settings.MAX_UPLOAD_BYTES
    ):
        """
        Initialize ingestion agent.

        Args:
            required_columns: Header names that must be present
            max_upload_bytes: Largest accepted file size
        """
        self.required_columns = required_columns or list(settings.REQUIRED_COLUMNS)
        self.max_upload_bytes = max_upload_bytes

    def load(self, path: str) -> List[ReviewRecord]:
        """
        Load and validate a review CSV file.

        Args:
            path: Path to the CSV file

        Returns:
            Valid ReviewRecord objects in file order

        Raises:
            IngestionError: If the file is not a usable review CSV
        """
        path = str(path)

        if not path.endswith(".csv"):
            raise IngestionError("Please upload a CSV file")

        if not os.path.exists(path):
            raise IngestionError(f"Error reading file: {path} does not exist")

        size = os.path.getsize(path)
        if size > self.max_upload_bytes:
            raise IngestionError(
                f"File size must be less than {self.max_upload_bytes // (1024 * 1024)}MB"
            )

        try:
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True
            )
        except pd.errors.EmptyDataError:
            raise IngestionError("CSV file is empty") from None
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise IngestionError(f"Error reading file: {e}") from e

        logger.info(f"Read {len(df)} rows from {path}")
        return self.parse_frame(df)

    def parse_frame(self, df: pd.DataFrame) -> List[ReviewRecord]:
        """
        Convert a DataFrame of raw CSV rows into review records.

        Args:
            df: Rows with (at least) the required columns

        Returns:
            Valid ReviewRecord objects in row order

        Raises:
            IngestionError: On empty input, missing columns or no valid rows
        """
        if df.empty:
            raise IngestionError("CSV file is empty")

        missing_columns = [col for col in self.required_columns if col not in df.columns]
        if missing_columns:
            raise IngestionError(
                f"Missing required columns: {', '.join(missing_columns)}"
            )

        records = []
        skipped = 0

        for row in df.to_dict(orient="records"):
            record = ReviewRecord(
                movie=_clean_text(row.get("Movie")),
                review=_clean_text(row.get("Review")),
                rating=parse_rating(row.get("Rating")),
                genre=_clean_text(row.get("Genre"))
            )

            if not self._is_valid(record):
                skipped += 1
                logger.debug(f"Skipping invalid row: {row}")
                continue

            records.append(record)

        if skipped:
            logger.info(f"Skipped {skipped} invalid rows")

        if not records:
            raise IngestionError("No valid reviews found. Please check your CSV format.")

        logger.info(f"Ingested {len(records)} reviews")
        return records

    def _is_valid(self, record: ReviewRecord) -> bool:
        return bool(
            record.movie
            and record.review
            and record.genre
            and settings.MIN_RATING_EXCLUSIVE < record.rating <= settings.MAX_RATING
        )
