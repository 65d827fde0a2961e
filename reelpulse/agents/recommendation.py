"""
Recommendation Selector.

Picks a single movie to highlight from the aggregator's rating-sorted
output, optionally restricted to a preferred genre.
"""

import logging
from typing import Optional, Sequence

from reelpulse.models.analysis import AnalysisResult, GenreRecommendation, MovieAnalysis

logger = logging.getLogger(__name__)


def get_top_recommended_movie(
    movies: Sequence[MovieAnalysis]
) -> Optional[MovieAnalysis]:
    """
    Return the first movie, or None if there are none.

    `movies` must already be sorted by average rating (descending), as
    AnalysisResult.movies is. No sorting happens here: for unsorted input
    the result is simply the first element.
    """
    if not movies:
        return None
    return movies[0]


def get_genre_based_recommendation(
    movies: Sequence[MovieAnalysis],
    preferred_genre: Optional[str]
) -> GenreRecommendation:
    """
    Return the top movie within a preferred genre.

    Falls back to the overall top movie when no preference is given or no
    movie matches it; `is_genre_filtered` is True only when the returned
    movie matches the preference.

    Args:
        movies: Movies sorted by average rating (descending)
        preferred_genre: Genre to match case-insensitively (exact match)

    Returns:
        GenreRecommendation
    """
    if not preferred_genre or not movies:
        return GenreRecommendation(
            movie=get_top_recommended_movie(movies),
            is_genre_filtered=False
        )

    wanted = preferred_genre.lower()
    genre_movies = [m for m in movies if m.genre.lower() == wanted]

    if not genre_movies:
        logger.info(f"No movies in genre '{preferred_genre}', using overall top movie")
        return GenreRecommendation(
            movie=get_top_recommended_movie(movies),
            is_genre_filtered=False
        )

    # Input order is rating order, so the first match is the genre's best
    return GenreRecommendation(movie=genre_movies[0], is_genre_filtered=True)


class RecommendationSelector:
    """
    Recommendation lookups bound to one aggregation result.

    Only accepts an AnalysisResult, whose movies are guaranteed to be in
    rating order.
    """

    def __init__(self, result: AnalysisResult):
        if not isinstance(result, AnalysisResult):
            raise TypeError(
                f"RecommendationSelector needs an AnalysisResult, got {type(result).__name__}"
            )
        self.result = result

    def top(self) -> Optional[MovieAnalysis]:
        return get_top_recommended_movie(self.result.movies)

    def for_genre(self, preferred_genre: Optional[str]) -> GenreRecommendation:
        return get_genre_based_recommendation(self.result.movies, preferred_genre)
