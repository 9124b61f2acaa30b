"""Core modules for ReviewLens."""

from .models import *
from .config import settings
from .lexicon import Lexicon, load_lexicon, default_lexicon
from .sentiment import *
from .categories import PROBLEM_CATEGORIES, PHRASE_STOPWORDS
from .problems import *
from .report import AnalysisReport, analyze_reviews

__all__ = [
    "settings",
    "Lexicon",
    "SentimentScorer",
    "ProblemExtractor",
    "AnalysisReport",
    "analyze_reviews",
    "ScoredWord",
    "ReviewResult",
    "CorpusSentiment",
    "CategoryMatch",
    "ProblemReport",
]
