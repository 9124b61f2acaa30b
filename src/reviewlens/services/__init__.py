"""Services for ReviewLens."""

from .store_client import StoreReviewService, detect_platform

__all__ = [
    "StoreReviewService",
    "detect_platform",
]
