"""
ReelPulse - Movie Review Analytics

CLI entry point for analyzing a movie review CSV.
"""

import argparse
import logging
import sys

import pandas as pd

from reelpulse.agents.ingestion import IngestionError
from reelpulse.orchestrator import AnalysisPipeline, AnalysisReport
from reelpulse.utils.storage import PreferenceStore
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ReelPulse - Movie Review Analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a review export
  python main.py --csv reviews.csv

  # Recommend the best Drama and remember the preference
  python main.py --csv reviews.csv --genre Drama --save-genre

CSV must contain the columns: Movie, Review, Rating, Genre
        """
    )

    parser.add_argument(
        "--csv",
        required=True,
        help="Path to the review CSV file"
    )

    parser.add_argument(
        "--genre",
        help="Preferred genre for the recommendation (default: saved preference)"
    )

    parser.add_argument(
        "--save-genre",
        action="store_true",
        help="Save --genre as the preferred genre for future runs (clears it if --genre is omitted)"
    )

    parser.add_argument(
        "--preferences",
        default=str(settings.PREFERENCES_PATH),
        help=f"Preferences file (default: {settings.PREFERENCES_PATH})"
    )

    parser.add_argument(
        "--top",
        type=int,
        default=settings.DEFAULT_TOP_MOVIES,
        help=f"Number of movies to list (default: {settings.DEFAULT_TOP_MOVIES})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def print_report(report: AnalysisReport, top: int) -> None:
    """Print the analysis report to stdout."""
    stats = report.result.overall_stats

    print("=" * 60)
    print("Overall Statistics")
    print("=" * 60)
    print(f"Movies: {stats.total_movies}")
    print(f"Reviews: {stats.total_reviews}")
    if report.result.has_data:
        print(f"Average Rating: {stats.average_rating:.1f}")
    else:
        print("Average Rating: n/a (no data)")
    print()

    if not report.result.has_data:
        return

    print(f"Top {min(top, stats.total_movies)} Movies")
    print("-" * 60)
    with pd.option_context("display.max_colwidth", 40, "display.width", 120):
        print(report.result.to_dataframe().head(top).to_string(index=False))
    print()

    print("Genre Insights")
    print("-" * 60)
    for summary in report.genre_breakdown:
        print(
            f"  {summary.genre:<20} {summary.average_rating:.1f}  "
            f"{summary.average_positive_percentage:.1f}% positive  "
            f"({summary.movie_count} movies)"
        )
    print()

    recommendation = report.recommendation
    print("Recommendation")
    print("-" * 60)
    if report.preferred_genre and not recommendation.is_genre_filtered:
        print(f"No movies found in '{report.preferred_genre}', showing overall best.")
    movie = recommendation.movie
    print(
        f"{movie.movie} ({movie.genre}) - {movie.average_rating:.1f}/5, "
        f"{movie.positive_percentage:.1f}% positive"
    )
    if movie.top_keywords:
        print(f"Keywords: {', '.join(movie.top_keywords)}")


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    print("=" * 60)
    print("ReelPulse - Movie Review Analytics")
    print("=" * 60)
    print(f"CSV: {args.csv}")
    if args.genre:
        print(f"Preferred Genre: {args.genre}")
    print()

    try:
        store = PreferenceStore(args.preferences)
        if args.save_genre:
            store.preferred_genre = args.genre

        pipeline = AnalysisPipeline(preference_store=store)
        report = pipeline.run(args.csv, preferred_genre=args.genre)

        print_report(report, args.top)

        logger.info("ReelPulse completed successfully")
        sys.exit(0)

    except IngestionError as e:
        logger.error(f"Could not load reviews: {e}")
        print(f"\n❌ {e}")
        sys.exit(1)

    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        print("\n⚠️  Analysis interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        print(f"\n❌ Analysis failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
