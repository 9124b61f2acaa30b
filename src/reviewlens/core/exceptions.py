"""Errors raised at the boundaries around the analysis core.

The scorer and extractor never raise on documented input. These errors
belong to the callers: corpus validation, lexicon loading and store
fetching.
"""


class ReviewLensError(Exception):
    """Base class for user-facing ReviewLens errors."""


class InsufficientReviewsError(ReviewLensError):
    """Too few reviews were supplied for a meaningful report."""

    def __init__(self, count: int, minimum: int):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Please provide at least {minimum} reviews for meaningful analysis (got {count})."
        )


class LexiconLoadError(ReviewLensError):
    """A sentiment lexicon could not be loaded."""


class InvalidStoreUrlError(ReviewLensError):
    """The URL is not a supported store link or carries no app id."""


class NoReviewsFoundError(ReviewLensError):
    """The store returned zero reviews."""


class ReviewFetchError(ReviewLensError):
    """Network or scraper failure while fetching reviews."""
