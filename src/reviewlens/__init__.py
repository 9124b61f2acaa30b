"""ReviewLens - sentiment and problem analysis for mobile app reviews."""

__version__ = "1.0.0"
__author__ = "ReviewLens Team"

from .core.models import *
from .core.config import settings
from .core.report import AnalysisReport, analyze_reviews
from .core.sentiment import SentimentScorer
from .core.problems import ProblemExtractor
from .services.store_client import StoreReviewService

__all__ = [
    "settings",
    "AnalysisReport",
    "analyze_reviews",
    "SentimentScorer",
    "ProblemExtractor",
    "StoreReviewService",
]
