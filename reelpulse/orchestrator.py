"""
Pipeline Orchestrator.

Coordinates ingestion, aggregation, genre insights and recommendation
into a single report.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from reelpulse.agents.aggregation import ReviewAggregator, get_genre_breakdown, get_genre_insights
from reelpulse.agents.ingestion import CSVIngestionAgent
from reelpulse.agents.recommendation import RecommendationSelector
from reelpulse.models.analysis import AnalysisResult, GenreRecommendation, GenreSummary
from reelpulse.models.review import ReviewRecord
from reelpulse.utils.storage import PreferenceStore

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Everything the presentation layer needs from one run."""
    result: AnalysisResult
    recommendation: GenreRecommendation
    preferred_genre: Optional[str] = None
    genre_insights: Dict[str, float] = field(default_factory=dict)
    genre_breakdown: List[GenreSummary] = field(default_factory=list)


class AnalysisPipeline:
    """
    Runs the analysis flow:
    1. Ingestion → 2. Aggregation → 3. Genre Insights → 4. Recommendation

    The preferred genre is read from the preference store (if any) unless
    the caller passes one explicitly.
    """

    def __init__(
        self,
        preference_store: Optional[PreferenceStore] = None,
        ingestion_agent: Optional[CSVIngestionAgent] = None,
        aggregator: Optional[ReviewAggregator] = None
    ):
        """
        Initialize analysis pipeline.

        Args:
            preference_store: Source of the saved preferred genre
            ingestion_agent: CSV loader (default settings if None)
            aggregator: Review aggregator (default settings if None)
        """
        self.preference_store = preference_store
        self.ingestion_agent = ingestion_agent or CSVIngestionAgent()
        self.aggregator = aggregator or ReviewAggregator()

    def run(self, csv_path: str, preferred_genre: Optional[str] = None) -> AnalysisReport:
        """
        Load a review CSV and analyze it.

        Args:
            csv_path: Path to the uploaded CSV
            preferred_genre: Overrides the stored preference when given

        Returns:
            AnalysisReport

        Raises:
            IngestionError: If the CSV cannot be loaded
        """
        logger.info(f"Loading reviews from {csv_path}")
        records = self.ingestion_agent.load(csv_path)
        return self.analyze(records, preferred_genre)

    def analyze(
        self,
        records: Sequence[ReviewRecord],
        preferred_genre: Optional[str] = None
    ) -> AnalysisReport:
        """Analyze in-memory records and select a recommendation."""
        if preferred_genre is None and self.preference_store is not None:
            preferred_genre = self.preference_store.preferred_genre
            if preferred_genre:
                logger.info(f"Using saved preferred genre: {preferred_genre}")

        result = self.aggregator.analyze(records)
        genre_insights = get_genre_insights(result.movies)
        genre_breakdown = get_genre_breakdown(result.movies)
        recommendation = RecommendationSelector(result).for_genre(preferred_genre)

        if recommendation.movie is not None:
            logger.info(
                f"Recommended '{recommendation.movie.movie}' "
                f"(genre filtered: {recommendation.is_genre_filtered})"
            )

        return AnalysisReport(
            result=result,
            recommendation=recommendation,
            preferred_genre=preferred_genre,
            genre_insights=genre_insights,
            genre_breakdown=genre_breakdown
        )
