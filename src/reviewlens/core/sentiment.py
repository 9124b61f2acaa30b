"""Lexicon-based sentiment scoring with negation and intensifier handling."""

import logging
import math
import re
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .constants import SentimentConstants
from .lexicon import Lexicon, default_lexicon
from .models import CorpusSentiment, ReviewResult, ScoredWord, SentimentLabel, WordStat

logger = logging.getLogger(__name__)

_NON_TOKEN_CHARS = re.compile(r"[^a-z'\s-]")


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves toward +infinity (so -1.25 -> -1.2, 0.0625 -> 0.063 at 3 places)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def tokenize(text: str) -> List[str]:
    """Lowercase, keep letters/apostrophes/hyphens, split on whitespace, drop 1-char tokens."""
    cleaned = _NON_TOKEN_CHARS.sub(" ", (text or "").lower())
    return [t for t in cleaned.split() if len(t) >= SentimentConstants.MIN_TOKEN_LENGTH]


def label_for_score(score: float) -> SentimentLabel:
    if score > SentimentConstants.POSITIVE_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score < SentimentConstants.NEGATIVE_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def get_sentiment_color(label) -> str:
    """Display colour for a label (enum or plain string)."""
    key = label.value if isinstance(label, SentimentLabel) else str(label)
    return SentimentConstants.LABEL_COLORS.get(key, SentimentConstants.LABEL_COLORS["neutral"])


@dataclass(frozen=True)
class _Pending:
    """Modifiers waiting for the next lexicon word."""
    negated: bool = False
    multiplier: float = 1.0


_NO_MODIFIER = _Pending()


class SentimentScorer:
    """Scores reviews against a read-only lexicon.

    The scorer holds no per-run state, so one instance can serve any
    number of corpora concurrently.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon if lexicon is not None else default_lexicon()

    def score_review(self, text: str, index: int = 0) -> ReviewResult:
        """Score one review.

        Tokens are consumed left to right. A negation word arms a sign flip
        and an intensifier arms a multiplier; both apply only to the next
        token that is neither. If that token is not in the lexicon the
        pending modifiers are dropped without effect, so "not a great app"
        leaves "great" positive while "not great" flips it.
        """
        tokens = tokenize(text)
        lexicon = self.lexicon
        total = 0.0
        words: List[ScoredWord] = []
        pending = _NO_MODIFIER

        for token in tokens:
            if lexicon.is_negation(token):
                pending = _Pending(negated=True, multiplier=pending.multiplier)
                continue
            multiplier = lexicon.multiplier(token)
            if multiplier:
                pending = _Pending(negated=pending.negated, multiplier=multiplier)
                continue
            if token in lexicon:
                weight = round_half_up(lexicon[token] * pending.multiplier, SentimentConstants.WORD_SCORE_DECIMALS)
                if pending.negated:
                    weight = -weight
                total += weight
                words.append(ScoredWord(word=token, score=weight))
            pending = _NO_MODIFIER

        comparative = total / len(tokens) if tokens else 0.0
        score = round_half_up(total, SentimentConstants.SCORE_DECIMALS)
        return ReviewResult(
            index=index,
            text=text,
            score=score,
            comparative=round_half_up(comparative, SentimentConstants.COMPARATIVE_DECIMALS),
            label=label_for_score(score),
            words=tuple(words),
        )

    def analyze_corpus(self, reviews: Sequence[str]) -> CorpusSentiment:
        """Score every review and aggregate label counts, average, extremes and top words."""
        results = [self.score_review(text, index=i) for i, text in enumerate(reviews)]

        counts = {label: 0 for label in SentimentLabel}
        for r in results:
            counts[r.label] += 1

        average = sum(r.score for r in results) / len(results) if results else 0.0

        # Stable ascending sort: first of the lowest, last of the highest.
        ordered = sorted(results, key=lambda r: r.score)

        logger.debug(f"Scored {len(results)} reviews, average {average:.2f}")
        return CorpusSentiment(
            total=len(results),
            positive=counts[SentimentLabel.POSITIVE],
            negative=counts[SentimentLabel.NEGATIVE],
            neutral=counts[SentimentLabel.NEUTRAL],
            average_score=round_half_up(average, SentimentConstants.SCORE_DECIMALS),
            most_positive=ordered[-1] if ordered else None,
            most_negative=ordered[0] if ordered else None,
            top_words=self._top_words(results),
            results=results,
        )

    @staticmethod
    def _top_words(results: Sequence[ReviewResult], limit: int = SentimentConstants.TOP_WORDS_LIMIT) -> List[WordStat]:
        counts: Counter = Counter()
        totals: Dict[str, float] = defaultdict(float)
        for r in results:
            for w in r.words:
                counts[w.word] += 1
                totals[w.word] += w.score

        stats = [WordStat(word=word, count=counts[word], total_score=totals[word]) for word in counts]
        # sorted() is stable, so equal counts keep first-encountered order
        stats.sort(key=lambda s: s.count, reverse=True)
        return stats[:limit]


def score_review(text: str) -> ReviewResult:
    """Score a single review with the default lexicon."""
    return SentimentScorer().score_review(text)


def analyze_corpus(reviews: Sequence[str]) -> CorpusSentiment:
    """Analyze a corpus with the default lexicon."""
    return SentimentScorer().analyze_corpus(reviews)
