"""Shared utility functions for column_extractor package."""

from column_extractor.utils.cells import display_text, is_numeric

__all__ = [
    "display_text",
    "is_numeric",
]
