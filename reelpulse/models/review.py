"""
Review data model.

Represents one parsed row of uploaded review data.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReviewRecord:
    """
    One review row (movie, review text, rating, genre).

    Produced by the CSV ingestion agent. The analytics core consumes it
    as-is and does not validate it.
    """
    movie: str  # Grouping key, matched exactly (case-sensitive)
    review: str  # Free text, may be empty
    rating: float  # Expected range (0, 5]
    genre: str

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "movie": self.movie,
            "review": self.review,
            "rating": self.rating,
            "genre": self.genre
        }
