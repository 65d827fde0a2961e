"""
Unit tests for the CSV Ingestion Agent.
"""

import pandas as pd
import pytest
from reelpulse.agents.ingestion import CSVIngestionAgent, IngestionError, parse_rating
from reelpulse.models.review import ReviewRecord


@pytest.fixture
def agent():
    return CSVIngestionAgent()


def write_csv(tmp_path, content, name="reviews.csv"):
    path = tmp_path / name
    path.write_text(content)
    return str(path)


def test_load_valid_rows(agent, tmp_path):
    path = write_csv(tmp_path, (
        "Movie,Review,Rating,Genre\n"
        "  Inception  , Mind bending ,5, Sci-Fi \n"
        "Heat,\"Tense, stylish heist\",4.5,Crime\n"
    ))

    records = agent.load(path)

    assert records == [
        ReviewRecord(movie="Inception", review="Mind bending", rating=5.0, genre="Sci-Fi"),
        ReviewRecord(movie="Heat", review="Tense, stylish heist", rating=4.5, genre="Crime"),
    ]


def test_invalid_rows_are_dropped(agent, tmp_path):
    path = write_csv(tmp_path, (
        "Movie,Review,Rating,Genre\n"
        "Good,fine film,4,Drama\n"
        "ZeroRating,fine film,0,Drama\n"
        "TooHigh,fine film,6,Drama\n"
        "NotANumber,fine film,abc,Drama\n"
        "NoReview,,3,Drama\n"
        "NoGenre,fine film,3,\n"
        ",no title,3,Drama\n"
    ))

    records = agent.load(path)

    assert [r.movie for r in records] == ["Good"]


def test_blank_lines_and_extra_columns(agent, tmp_path):
    path = write_csv(tmp_path, (
        "Movie,Review,Rating,Genre,Year\n"
        "\n"
        "Alien,scary,5,Horror,1979\n"
        "\n"
    ))

    records = agent.load(path)

    assert len(records) == 1
    assert records[0].genre == "Horror"


def test_rejects_non_csv_extension(agent, tmp_path):
    path = write_csv(tmp_path, "Movie,Review,Rating,Genre\n", name="reviews.txt")

    with pytest.raises(IngestionError, match="Please upload a CSV file"):
        agent.load(path)


def test_missing_file(agent, tmp_path):
    with pytest.raises(IngestionError, match="does not exist"):
        agent.load(str(tmp_path / "missing.csv"))


def test_rejects_large_file(tmp_path):
    path = write_csv(tmp_path, "Movie,Review,Rating,Genre\nA,fine film,4,Drama\n")

    with pytest.raises(IngestionError, match="File size"):
        CSVIngestionAgent(max_upload_bytes=10).load(path)


def test_missing_columns(agent, tmp_path):
    path = write_csv(tmp_path, "Movie,Review\nA,fine\n")

    with pytest.raises(IngestionError, match="Missing required columns: Rating, Genre"):
        agent.load(path)


@pytest.mark.parametrize("content", ["", "Movie,Review,Rating,Genre\n"])
def test_empty_file(agent, tmp_path, content):
    path = write_csv(tmp_path, content)

    with pytest.raises(IngestionError, match="CSV file is empty"):
        agent.load(path)


def test_no_valid_rows(agent, tmp_path):
    path = write_csv(tmp_path, "Movie,Review,Rating,Genre\nA,fine,9,Drama\n")

    with pytest.raises(IngestionError, match="No valid reviews found"):
        agent.load(path)


def test_parse_frame_in_memory(agent):
    df = pd.DataFrame({
        "Movie": ["A", "B"],
        "Review": ["good", "bad"],
        "Rating": ["4", "2"],
        "Genre": ["Drama", "Comedy"],
    })

    records = agent.parse_frame(df)

    assert [(r.movie, r.rating) for r in records] == [("A", 4.0), ("B", 2.0)]


def test_ingestion_error_is_value_error():
    assert issubclass(IngestionError, ValueError)


@pytest.mark.parametrize("raw,expected", [
    ("4.5", 4.5),
    (" 3 ", 3.0),
    ("4.5 stars", 4.5),
    ("4/5", 4.0),
    (".5", 0.5),
    ("", 0.0),
    ("abc", 0.0),
    (None, 0.0),
    (3, 3.0),
    (float("nan"), 0.0),
])
def test_parse_rating(raw, expected):
    assert parse_rating(raw) == expected


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
