"""Utility modules for ReviewLens."""

from .data_prep import export_to_json, load_reviews, prepare_export, split_reviews

__all__ = [
    "export_to_json",
    "load_reviews",
    "prepare_export",
    "split_reviews",
]
