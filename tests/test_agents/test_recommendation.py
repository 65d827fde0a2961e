"""
Unit tests for the Recommendation Selector.
"""

import pytest
from reelpulse.agents.aggregation import analyze_reviews
from reelpulse.agents.recommendation import (
    RecommendationSelector,
    get_genre_based_recommendation,
    get_top_recommended_movie
)
from reelpulse.models.analysis import GenreRecommendation, MovieAnalysis
from reelpulse.models.review import ReviewRecord


def movie_analysis(movie, genre, average_rating):
    return MovieAnalysis(
        movie=movie,
        genre=genre,
        total_reviews=1,
        average_rating=average_rating,
        positive_reviews=1,
        positive_percentage=100.0
    )


@pytest.fixture
def movies():
    """Pre-sorted by average rating."""
    return [
        movie_analysis("A", "Drama", 4.5),
        movie_analysis("B", "Comedy", 4.0),
        movie_analysis("C", "Comedy", 3.0),
    ]


def test_top_movie_is_first(movies):
    assert get_top_recommended_movie(movies).movie == "A"


def test_top_movie_empty():
    assert get_top_recommended_movie([]) is None


def test_top_movie_does_not_sort():
    """Unsorted input returns the first element, not the maximum."""
    unsorted = [movie_analysis("Low", "Drama", 2.0), movie_analysis("High", "Drama", 5.0)]
    assert get_top_recommended_movie(unsorted).movie == "Low"


def test_genre_match_is_case_insensitive(movies):
    recommendation = get_genre_based_recommendation(movies, "comedy")

    assert recommendation.movie.movie == "B"
    assert recommendation.is_genre_filtered is True


def test_genre_without_match_falls_back_to_top(movies):
    recommendation = get_genre_based_recommendation(movies, "Horror")

    assert recommendation.movie.movie == "A"
    assert recommendation.is_genre_filtered is False


def test_genre_match_is_exact(movies):
    """No partial matching: 'Com' does not match 'Comedy'."""
    recommendation = get_genre_based_recommendation(movies, "Com")
    assert recommendation.movie.movie == "A"
    assert recommendation.is_genre_filtered is False


@pytest.mark.parametrize("preferred_genre", [None, ""])
def test_no_preference_returns_top(movies, preferred_genre):
    recommendation = get_genre_based_recommendation(movies, preferred_genre)
    assert recommendation == GenreRecommendation(movie=movies[0], is_genre_filtered=False)


def test_empty_movies():
    recommendation = get_genre_based_recommendation([], "Drama")
    assert recommendation.movie is None
    assert recommendation.is_genre_filtered is False


def test_selector_uses_aggregated_order():
    result = analyze_reviews([
        ReviewRecord("Okay Drama", "fine", 3, "Drama"),
        ReviewRecord("Great Comedy", "funny", 5, "Comedy"),
        ReviewRecord("Great Drama", "moving", 4.5, "Drama"),
    ])
    selector = RecommendationSelector(result)

    assert selector.top().movie == "Great Comedy"
    assert selector.for_genre("DRAMA").movie.movie == "Great Drama"
    assert selector.for_genre("DRAMA").is_genre_filtered is True


def test_selector_rejects_plain_lists(movies):
    with pytest.raises(TypeError):
        RecommendationSelector(movies)


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
