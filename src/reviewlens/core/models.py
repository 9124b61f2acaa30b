"""Data models for ReviewLens."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Tuple, Any


class SentimentLabel(str, Enum):
    """Polarity bucket of a scored review."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class ScoredWord:
    """One lexicon hit within a review, after negation and intensifier."""
    word: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "score": self.score}


@dataclass(frozen=True)
class ReviewResult:
    """Sentiment of a single review."""
    index: int
    text: str
    score: float
    comparative: float
    label: SentimentLabel
    words: Tuple[ScoredWord, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "text": self.text,
            "score": self.score,
            "comparative": self.comparative,
            "label": self.label.value,
            "words": [w.to_dict() for w in self.words],
        }


@dataclass(frozen=True)
class WordStat:
    """Corpus-wide frequency of a scored word."""
    word: str
    count: int
    total_score: float

    @property
    def avg_score(self) -> float:
        return self.total_score / self.count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "count": self.count,
            "totalScore": self.total_score,
            "avgScore": self.avg_score,
        }


@dataclass
class CorpusSentiment:
    """Aggregate sentiment over every review of a run."""
    total: int
    positive: int
    negative: int
    neutral: int
    average_score: float
    most_positive: Optional[ReviewResult]
    most_negative: Optional[ReviewResult]
    top_words: List[WordStat]
    results: List[ReviewResult]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
            "averageScore": self.average_score,
            "mostPositive": self.most_positive.to_dict() if self.most_positive else None,
            "mostNegative": self.most_negative.to_dict() if self.most_negative else None,
            "topWords": [w.to_dict() for w in self.top_words],
            "results": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class ProblemCategory:
    """Static catalog entry describing one kind of complaint."""
    id: str
    name: str
    icon: str
    keywords: Tuple[str, ...]


@dataclass(frozen=True)
class MatchedReview:
    """A review that hit at least one keyword of a category."""
    index: int
    text: str
    matched_keywords: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "text": self.text,
            "matchedKeywords": list(self.matched_keywords),
        }


@dataclass
class CategoryMatch:
    """Reviews and keyword evidence collected for one category."""
    category: ProblemCategory
    matched_reviews: List[MatchedReview] = field(default_factory=list)
    matched_keywords: Dict[str, int] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.category.id

    @property
    def name(self) -> str:
        return self.category.name

    @property
    def icon(self) -> str:
        return self.category.icon

    @property
    def review_count(self) -> int:
        return len(self.matched_reviews)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "keywords": list(self.category.keywords),
            "matchedReviews": [r.to_dict() for r in self.matched_reviews],
            "matchedKeywords": dict(self.matched_keywords),
        }


@dataclass(frozen=True)
class PhraseFrequency:
    """A recurring n-gram and how often it occurs across the corpus."""
    phrase: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"phrase": self.phrase, "count": self.count}


@dataclass
class RecurringPhrases:
    """Top bigrams and trigrams mined from a corpus."""
    bigrams: List[PhraseFrequency]
    trigrams: List[PhraseFrequency]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bigrams": [p.to_dict() for p in self.bigrams],
            "trigrams": [p.to_dict() for p in self.trigrams],
        }


@dataclass
class ProblemReport:
    """Problem taxonomy of a corpus."""
    categories: List[CategoryMatch]
    total_reviews: int
    reviews_with_problems: int
    recurring_phrases: RecurringPhrases

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": [c.to_dict() for c in self.categories],
            "totalReviews": self.total_reviews,
            "reviewsWithProblems": self.reviews_with_problems,
            "recurringPhrases": self.recurring_phrases.to_dict(),
        }


@dataclass
class StoreReview:
    """A review as returned by the store fetch layer."""
    text: str
    score: Optional[int] = None
    author: Optional[str] = None
    date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "score": self.score, "author": self.author, "date": self.date}


@dataclass
class FetchResult:
    """Reviews fetched for one store listing."""
    platform: str
    reviews: List[StoreReview]
    has_more: bool = False
    next_page: Optional[Any] = None

    @property
    def count(self) -> int:
        return len(self.reviews)

    @property
    def texts(self) -> List[str]:
        return [r.text for r in self.reviews]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "count": self.count,
            "reviews": [r.to_dict() for r in self.reviews],
            "hasMore": self.has_more,
            "nextPage": self.next_page,
        }
