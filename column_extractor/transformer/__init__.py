"""Transformer module for normalizing extracted values."""

from column_extractor.transformer.normalizer import (
    normalization_stages,
    normalize_values,
    remove_duplicates,
    to_lowercase,
    trim_whitespace,
)

__all__ = [
    "normalization_stages",
    "normalize_values",
    "remove_duplicates",
    "to_lowercase",
    "trim_whitespace",
]
