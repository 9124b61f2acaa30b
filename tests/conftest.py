"""Shared fixtures for ReviewLens tests."""

import pytest

from reviewlens.core.lexicon import Lexicon
from reviewlens.core.sentiment import SentimentScorer


SMALL_WEIGHTS = {
    "good": 3,
    "great": 3,
    "love": 3,
    "fine": 2,
    "ok": 1,
    "meh": -1,
    "bad": -3,
    "terrible": -3,
    "hate": -3,
}


@pytest.fixture
def small_lexicon():
    """Tiny lexicon with known weights."""
    return Lexicon(SMALL_WEIGHTS, name="small")


@pytest.fixture
def scorer(small_lexicon):
    return SentimentScorer(small_lexicon)
