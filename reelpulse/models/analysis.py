"""
Analysis data models.

Per-movie statistics, dataset-wide statistics and recommendation results
produced by the analytics core.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from reelpulse.models.review import ReviewRecord


@dataclass(frozen=True)
class MovieAnalysis:
    """
    Aggregated statistics for all reviews of one movie.
    Built by the review aggregator, never mutated afterwards.
    """
    movie: str
    genre: str  # Genre of the first record seen for this movie
    total_reviews: int
    average_rating: float  # Rounded to 1 decimal
    positive_reviews: int  # Reviews with rating >= 4
    positive_percentage: float  # Rounded to 1 decimal
    top_keywords: Tuple[str, ...] = ()
    reviews: Tuple[ReviewRecord, ...] = ()

    def to_dict(self, include_reviews: bool = False) -> dict:
        """Convert to JSON-serializable dict."""
        data = {
            "movie": self.movie,
            "genre": self.genre,
            "total_reviews": self.total_reviews,
            "average_rating": self.average_rating,
            "positive_reviews": self.positive_reviews,
            "positive_percentage": self.positive_percentage,
            "top_keywords": list(self.top_keywords)
        }
        if include_reviews:
            data["reviews"] = [r.to_dict() for r in self.reviews]
        return data


@dataclass(frozen=True)
class OverallStats:
    """Dataset-wide statistics."""
    total_movies: int
    total_reviews: int
    average_rating: float  # Mean of per-movie averages; NaN when no movies

    def to_dict(self) -> dict:
        return {
            "total_movies": self.total_movies,
            "total_reviews": self.total_reviews,
            "average_rating": self.average_rating
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Output of one aggregation run.

    `movies` is sorted descending by average rating (ties keep the order in
    which movies were first seen). The recommendation selector relies on
    this ordering.
    """
    movies: Tuple[MovieAnalysis, ...]
    overall_stats: OverallStats

    @property
    def has_data(self) -> bool:
        """False for an empty dataset, where the overall average is NaN."""
        return self.overall_stats.total_movies > 0

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict (NaN average becomes None)."""
        stats = self.overall_stats.to_dict()
        if math.isnan(stats["average_rating"]):
            stats["average_rating"] = None
        return {
            "movies": [m.to_dict() for m in self.movies],
            "overall_stats": stats
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One row per movie, in rating order, for tabular display."""
        columns = [
            "Movie", "Genre", "Reviews", "Avg Rating",
            "Positive", "Positive %", "Keywords"
        ]
        rows = [
            {
                "Movie": m.movie,
                "Genre": m.genre,
                "Reviews": m.total_reviews,
                "Avg Rating": m.average_rating,
                "Positive": m.positive_reviews,
                "Positive %": m.positive_percentage,
                "Keywords": ", ".join(m.top_keywords)
            }
            for m in self.movies
        ]
        return pd.DataFrame(rows, columns=columns)


@dataclass(frozen=True)
class GenreRecommendation:
    """
    A recommended movie plus whether it satisfies the genre preference.

    `is_genre_filtered` is False when no preference was given or when no
    movie matched it and the overall top movie was returned instead.
    """
    movie: Optional[MovieAnalysis] = None
    is_genre_filtered: bool = False


@dataclass(frozen=True)
class GenreSummary:
    """Per-genre performance across the movies of one analysis."""
    genre: str
    average_rating: float  # Mean of member movies' average ratings
    average_positive_percentage: float  # Mean of member movies' positive %
    movie_count: int

    def to_dict(self) -> dict:
        return {
            "genre": self.genre,
            "average_rating": self.average_rating,
            "average_positive_percentage": self.average_positive_percentage,
            "movie_count": self.movie_count
        }
