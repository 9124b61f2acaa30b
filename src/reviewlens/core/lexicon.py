"""Sentiment lexicon and modifier word lists.

A ``Lexicon`` is read-only reference data: it is built once, never
mutated, and can be shared by any number of scorers and threads.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, Mapping, Optional

from .config import settings
from .exceptions import LexiconLoadError

logger = logging.getLogger(__name__)


NEGATION_WORDS: FrozenSet[str] = frozenset({
    "not", "don't", "doesn't", "didn't", "won't", "wouldn't", "couldn't",
    "shouldn't", "isn't", "aren't", "wasn't", "weren't", "no", "never",
    "neither", "nor", "hardly", "barely", "scarcely", "nothing",
})

INTENSIFIERS: Mapping[str, float] = MappingProxyType({
    "very": 1.5, "really": 1.5, "extremely": 2.0, "absolutely": 2.0,
    "totally": 1.5, "completely": 1.5, "incredibly": 2.0, "super": 1.8,
    "so": 1.4, "too": 1.3, "pretty": 1.2, "quite": 1.3, "somewhat": 0.7,
    "slightly": 0.5,
})


class Lexicon:
    """Word polarity table plus the negation and intensifier lists."""

    def __init__(
        self,
        weights: Mapping[str, float],
        negations: Optional[FrozenSet[str]] = None,
        intensifiers: Optional[Mapping[str, float]] = None,
        name: str = "custom",
    ):
        self.name = name
        self._weights = MappingProxyType(dict(weights))
        self.negations = frozenset(NEGATION_WORDS if negations is None else negations)
        self.intensifiers = MappingProxyType(dict(INTENSIFIERS if intensifiers is None else intensifiers))

    @property
    def weights(self) -> Mapping[str, float]:
        return self._weights

    def get(self, word: str, default: Optional[float] = None) -> Optional[float]:
        return self._weights.get(word, default)

    def is_negation(self, word: str) -> bool:
        return word in self.negations

    def multiplier(self, word: str) -> Optional[float]:
        """Intensifier multiplier for ``word``, or None."""
        return self.intensifiers.get(word)

    def __contains__(self, word: object) -> bool:
        return word in self._weights

    def __getitem__(self, word: str) -> float:
        return self._weights[word]

    def __len__(self) -> int:
        return len(self._weights)

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __repr__(self) -> str:
        return f"Lexicon(name={self.name!r}, words={len(self)})"

    @classmethod
    def from_afinn(cls, language: str = "en") -> "Lexicon":
        """AFINN-165 integer word list shipped with the ``afinn`` package."""
        from afinn import Afinn
        from afinn.afinn import LANGUAGE_TO_FILENAME

        if language not in LANGUAGE_TO_FILENAME:
            raise LexiconLoadError(f"No AFINN word list for language: {language}")
        afinn = Afinn(language=language)
        weights = afinn.read_word_file(afinn.full_filename(LANGUAGE_TO_FILENAME[language]))
        logger.debug(f"Loaded {len(weights)} AFINN words")
        return cls(weights, name="afinn")

    @classmethod
    def from_vader(cls) -> "Lexicon":
        """VADER lexicon (float weights) from ``vaderSentiment``."""
        from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

        weights = dict(SentimentIntensityAnalyzer().lexicon)
        logger.debug(f"Loaded {len(weights)} VADER words")
        return cls(weights, name="vader")

    @classmethod
    def from_file(cls, path: str) -> "Lexicon":
        """Read a ``word<TAB>weight`` file; blank lines and ``#`` comments are skipped."""
        file_path = Path(path)
        if not file_path.is_file():
            raise LexiconLoadError(f"Lexicon file not found: {path}")

        weights: Dict[str, float] = {}
        with open(file_path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, 1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                word, sep, value = line.rpartition("\t")
                if not sep or not word:
                    raise LexiconLoadError(f"{path}:{line_no}: expected 'word<TAB>weight'")
                try:
                    weight = float(value)
                except ValueError:
                    raise LexiconLoadError(f"{path}:{line_no}: invalid weight {value!r}") from None
                weights[word.lower()] = int(weight) if weight.is_integer() else weight

        logger.debug(f"Loaded {len(weights)} words from {path}")
        return cls(weights, name=file_path.stem)


def load_lexicon(source: str = "afinn", path: str = "") -> Lexicon:
    """Build a lexicon from a named source."""
    source = (source or "").lower()
    if source == "afinn":
        return Lexicon.from_afinn()
    if source == "vader":
        return Lexicon.from_vader()
    if source == "file":
        if not path:
            raise LexiconLoadError("lexicon_source is 'file' but no lexicon_path was given")
        return Lexicon.from_file(path)
    raise LexiconLoadError(f"Unknown lexicon source: {source!r}")


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Process-wide lexicon chosen by settings, loaded once."""
    lexicon = load_lexicon(settings.lexicon_source, settings.lexicon_path)
    logger.info(f"Using {lexicon!r}")
    return lexicon
