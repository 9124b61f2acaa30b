"""Composition of sentiment and problem analyses into one report."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .config import settings
from .exceptions import InsufficientReviewsError
from .models import CorpusSentiment, ProblemReport, ReviewResult
from .problems import ProblemExtractor
from .sentiment import SentimentScorer, get_sentiment_color

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Sentiment and problem taxonomy of the same corpus."""
    sentiment: CorpusSentiment
    problems: ProblemReport

    def rows(self) -> List[ReviewResult]:
        """Per-review results, most negative first (ties keep input order)."""
        return sorted(self.sentiment.results, key=lambda r: r.score)

    def to_dict(self) -> Dict[str, Any]:
        rows = []
        for r in self.rows():
            row = r.to_dict()
            row["color"] = get_sentiment_color(r.label)
            rows.append(row)
        return {
            "sentiment": self.sentiment.to_dict(),
            "problems": self.problems.to_dict(),
            "rows": rows,
        }


def analyze_reviews(
    reviews: Sequence[str],
    scorer: Optional[SentimentScorer] = None,
    extractor: Optional[ProblemExtractor] = None,
    min_reviews: Optional[int] = None,
) -> AnalysisReport:
    """Run both analyses over ``reviews``.

    Args:
        reviews: Review texts in input order
        scorer: Sentiment scorer (default lexicon if omitted)
        extractor: Problem extractor (default catalog if omitted)
        min_reviews: Minimum corpus size; ``settings.min_reviews`` if None, 0 disables

    Raises:
        InsufficientReviewsError: If fewer than ``min_reviews`` reviews are given
    """
    minimum = settings.min_reviews if min_reviews is None else min_reviews
    if len(reviews) < minimum:
        raise InsufficientReviewsError(len(reviews), minimum)

    scorer = scorer or SentimentScorer()
    extractor = extractor or ProblemExtractor()

    logger.info(f"Analyzing {len(reviews)} reviews")
    report = AnalysisReport(
        sentiment=scorer.analyze_corpus(reviews),
        problems=extractor.extract_problems(reviews),
    )
    logger.info(
        f"Done: {report.sentiment.positive} positive, {report.sentiment.negative} negative, "
        f"{report.problems.reviews_with_problems} with problems"
    )
    return report
