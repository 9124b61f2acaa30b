"""Problem extraction: keyword categorization and recurring phrase mining."""

import logging
import re
from collections import Counter
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .categories import PHRASE_STOPWORDS, PROBLEM_CATEGORIES
from .constants import ProblemConstants
from .models import (
    CategoryMatch,
    MatchedReview,
    PhraseFrequency,
    ProblemCategory,
    ProblemReport,
    RecurringPhrases,
)

logger = logging.getLogger(__name__)

_NON_ALPHA = re.compile(r"[^a-z\s]")


def ngram_words(text: str) -> List[str]:
    """Lowercased alphabetic words long enough to take part in n-grams."""
    cleaned = _NON_ALPHA.sub(" ", (text or "").lower())
    return [w for w in cleaned.split() if len(w) >= ProblemConstants.MIN_NGRAM_WORD_LENGTH]


def extract_ngrams(words: Sequence[str], n: int) -> List[Tuple[str, ...]]:
    return [tuple(words[i:i + n]) for i in range(len(words) - n + 1)]


def _top_phrases(freq: Dict[str, int], limit: int) -> List[PhraseFrequency]:
    kept = [PhraseFrequency(phrase, count) for phrase, count in freq.items()
            if count >= ProblemConstants.MIN_PHRASE_COUNT]
    kept.sort(key=lambda p: p.count, reverse=True)
    return kept[:limit]


class ProblemExtractor:
    """Matches reviews against a problem catalog and mines frequent phrases.

    The catalog and stopword set are read-only; every call builds its own
    tallies, so repeated runs over the same input give identical output.
    """

    def __init__(
        self,
        categories: Optional[Sequence[ProblemCategory]] = None,
        stopwords: Optional[FrozenSet[str]] = None,
    ):
        self.categories: Tuple[ProblemCategory, ...] = tuple(PROBLEM_CATEGORIES if categories is None else categories)
        self.stopwords: FrozenSet[str] = frozenset(PHRASE_STOPWORDS if stopwords is None else stopwords)

    def categorize(self, reviews: Sequence[str]) -> List[CategoryMatch]:
        """Match each review against every category by case-insensitive substring test.

        Categories without any matched review are dropped; the rest are
        ordered by matched-review count, catalog order breaking ties.
        """
        matches = [CategoryMatch(category=c) for c in self.categories]

        for index, review in enumerate(reviews):
            lower = (review or "").lower()
            for match in matches:
                hits = tuple(kw for kw in match.category.keywords if kw in lower)
                if not hits:
                    continue
                for kw in hits:
                    match.matched_keywords[kw] = match.matched_keywords.get(kw, 0) + 1
                match.matched_reviews.append(MatchedReview(index=index, text=review, matched_keywords=hits))

        found = [m for m in matches if m.matched_reviews]
        found.sort(key=lambda m: m.review_count, reverse=True)
        return found

    def mine_recurring_phrases(self, reviews: Sequence[str]) -> RecurringPhrases:
        """Count bigrams and trigrams across the corpus and keep the frequent ones.

        Bigrams containing any stopword are skipped. Trigrams need at least
        two non-stopwords.
        """
        stopwords = self.stopwords
        bigram_freq: Counter = Counter()
        trigram_freq: Counter = Counter()

        for review in reviews:
            words = ngram_words(review)
            for gram in extract_ngrams(words, 2):
                if any(w in stopwords for w in gram):
                    continue
                phrase = " ".join(gram)
                bigram_freq[phrase] += 1
            for gram in extract_ngrams(words, 3):
                content = sum(1 for w in gram if w not in stopwords)
                if content < ProblemConstants.MIN_TRIGRAM_CONTENT_WORDS:
                    continue
                phrase = " ".join(gram)
                trigram_freq[phrase] += 1

        return RecurringPhrases(
            bigrams=_top_phrases(bigram_freq, ProblemConstants.MAX_BIGRAMS),
            trigrams=_top_phrases(trigram_freq, ProblemConstants.MAX_TRIGRAMS),
        )

    def extract_problems(self, reviews: Sequence[str]) -> ProblemReport:
        """Categorize the corpus and mine its recurring phrases."""
        categories = self.categorize(reviews)
        affected = {r.index for c in categories for r in c.matched_reviews}
        phrases = self.mine_recurring_phrases(reviews)

        logger.debug(
            f"{len(affected)}/{len(reviews)} reviews matched {len(categories)} categories; "
            f"{len(phrases.bigrams)} bigrams, {len(phrases.trigrams)} trigrams"
        )
        return ProblemReport(
            categories=categories,
            total_reviews=len(reviews),
            reviews_with_problems=len(affected),
            recurring_phrases=phrases,
        )


_default_extractor = ProblemExtractor()


def categorize(reviews: Sequence[str]) -> List[CategoryMatch]:
    return _default_extractor.categorize(reviews)


def mine_recurring_phrases(reviews: Sequence[str]) -> RecurringPhrases:
    return _default_extractor.mine_recurring_phrases(reviews)


def extract_problems(reviews: Sequence[str]) -> ProblemReport:
    return _default_extractor.extract_problems(reviews)
