"""
Review Aggregator and Genre Insights.

Groups review records by movie, computes per-movie and overall statistics,
and summarizes ratings and positive share per genre.
"""

import logging
import math
from typing import Dict, List, Optional, Sequence

import pandas as pd

from reelpulse.agents.keywords import KeywordExtractor
from reelpulse.models.analysis import AnalysisResult, GenreSummary, MovieAnalysis, OverallStats
from reelpulse.models.review import ReviewRecord
import config.settings as settings

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Round to `digits` decimals, halves rounding up.

    Python's round() rounds halves to even (round(0.25, 1) == 0.2);
    reported statistics round 0.25 to 0.3. NaN and infinities pass through.
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class ReviewAggregator:
    """
    Turns raw review records into per-movie analyses.

    Each call is an independent, pure computation: no state is kept
    between calls and the input records are not modified.
    """

    def __init__(
        self,
        keyword_extractor: Optional[KeywordExtractor] = None,
        positive_threshold: float = settings.POSITIVE_RATING_THRESHOLD
    ):
        """
        Initialize review aggregator.

        Args:
            keyword_extractor: Extractor used per movie (default rules if None)
            positive_threshold: Minimum rating counted as a positive review
        """
        self.keyword_extractor = keyword_extractor or KeywordExtractor()
        self.positive_threshold = positive_threshold

    def analyze(self, records: Sequence[ReviewRecord]) -> AnalysisResult:
        """
        Analyze a full dataset of review records.

        Args:
            records: Review records in upload order

        Returns:
            AnalysisResult with movies sorted by average rating (descending)
        """
        groups = self._group_by_movie(records)

        analyses = [
            self._analyze_movie(movie, movie_reviews)
            for movie, movie_reviews in groups.items()
        ]

        # Stable: movies with equal averages keep first-seen order
        analyses.sort(key=lambda m: m.average_rating, reverse=True)

        overall_stats = self._overall_stats(analyses, len(records))

        logger.info(
            f"Analyzed {overall_stats.total_reviews} reviews "
            f"across {overall_stats.total_movies} movies"
        )

        return AnalysisResult(movies=tuple(analyses), overall_stats=overall_stats)

    def _group_by_movie(
        self,
        records: Sequence[ReviewRecord]
    ) -> Dict[str, List[ReviewRecord]]:
        """Group records by exact movie title, in first-seen order."""
        groups: Dict[str, List[ReviewRecord]] = {}
        for record in records:
            groups.setdefault(record.movie, []).append(record)
        return groups

    def _analyze_movie(
        self,
        movie: str,
        movie_reviews: List[ReviewRecord]
    ) -> MovieAnalysis:
        """Compute statistics and keywords for one movie's reviews."""
        total_reviews = len(movie_reviews)
        average_rating = sum(r.rating for r in movie_reviews) / total_reviews
        positive_reviews = sum(
            1 for r in movie_reviews if r.rating >= self.positive_threshold
        )
        positive_percentage = positive_reviews / total_reviews * 100

        all_review_text = " ".join(r.review for r in movie_reviews)
        top_keywords = self.keyword_extractor.extract(all_review_text)

        # Genre comes from the first review, not a vote across reviews
        genre = movie_reviews[0].genre or settings.UNKNOWN_GENRE

        return MovieAnalysis(
            movie=movie,
            genre=genre,
            total_reviews=total_reviews,
            average_rating=round_half_up(average_rating),
            positive_reviews=positive_reviews,
            positive_percentage=round_half_up(positive_percentage),
            top_keywords=tuple(top_keywords),
            reviews=tuple(movie_reviews)
        )

    def _overall_stats(
        self,
        analyses: List[MovieAnalysis],
        total_reviews: int
    ) -> OverallStats:
        """
        Dataset-wide statistics.

        The overall average is a mean of per-movie averages, not a mean over
        individual reviews. With no movies it is NaN.
        """
        total_movies = len(analyses)
        if total_movies == 0:
            logger.warning("No reviews to analyze, overall average rating is undefined")
            average_rating = math.nan
        else:
            average_rating = round_half_up(
                sum(m.average_rating for m in analyses) / total_movies
            )

        return OverallStats(
            total_movies=total_movies,
            total_reviews=total_reviews,
            average_rating=average_rating
        )


def analyze_reviews(records: Sequence[ReviewRecord]) -> AnalysisResult:
    """Analyze records with the default aggregator settings."""
    return ReviewAggregator().analyze(records)


def get_genre_insights(movies: Sequence[MovieAnalysis]) -> Dict[str, float]:
    """
    Average rating per genre.

    Each genre's value is the mean of its movies' average ratings,
    rounded to 1 decimal. Genres appear in the order first seen.

    Args:
        movies: Movie analyses (typically AnalysisResult.movies)

    Returns:
        Mapping of genre to average rating
    """
    if not movies:
        return {}

    df = pd.DataFrame(
        {
            "genre": [m.genre for m in movies],
            "average_rating": [m.average_rating for m in movies]
        }
    )

    # numpy mean propagates NaN like the per-movie averages do
    genre_means = df.groupby("genre", sort=False)["average_rating"].apply(
        lambda ratings: ratings.to_numpy().mean()
    )

    return {
        genre: round_half_up(float(mean))
        for genre, mean in genre_means.items()
    }


def get_genre_breakdown(movies: Sequence[MovieAnalysis]) -> List[GenreSummary]:
    """
    Rating, positive share and movie count per genre.

    Averages are taken over the genre's movies (not its reviews) and
    rounded to 1 decimal. Sorted by average rating, highest first; genres
    with equal averages keep first-seen order.

    Args:
        movies: Movie analyses (typically AnalysisResult.movies)

    Returns:
        List of GenreSummary
    """
    if not movies:
        return []

    df = pd.DataFrame(
        {
            "genre": [m.genre for m in movies],
            "average_rating": [m.average_rating for m in movies],
            "positive_percentage": [m.positive_percentage for m in movies]
        }
    )

    summaries = [
        GenreSummary(
            genre=genre,
            average_rating=round_half_up(float(group["average_rating"].to_numpy().mean())),
            average_positive_percentage=round_half_up(
                float(group["positive_percentage"].to_numpy().mean())
            ),
            movie_count=len(group)
        )
        for genre, group in df.groupby("genre", sort=False)
    ]

    summaries.sort(key=lambda s: s.average_rating, reverse=True)
    return summaries
