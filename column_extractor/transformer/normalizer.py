"""Normalization stages applied to extracted column values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from column_extractor.config import setup_logging

if TYPE_CHECKING:
    from collections.abc import Callable

    from column_extractor.config import ExtractorOptions

logger = setup_logging(__name__)


def trim_whitespace(values: list[str]) -> list[str]:
    """Strip leading and trailing whitespace from every value."""
    return [value.strip() for value in values]


def to_lowercase(values: list[str]) -> list[str]:
    """Fold every value to lowercase."""
    return [value.lower() for value in values]


def remove_duplicates(values: list[str]) -> list[str]:
    """Keep the first occurrence of each value, preserving order."""
    return list(dict.fromkeys(values))


def normalization_stages(options: ExtractorOptions) -> list[tuple[str, Callable[[list[str]], list[str]]]]:
    """Return the enabled stages, always in trim → lowercase → dedupe order.

    Parameters
    ----------
    options
        Supplies the ``trim_whitespace``, ``lowercase`` and
        ``remove_duplicates`` flags.

    Returns
    -------
    list[tuple[str, Callable]]
        ``(log message, stage function)`` pairs.
    """
    stages: list[tuple[str, Callable[[list[str]], list[str]]]] = [
        ("Trimming whitespace", trim_whitespace),
        ("Converting to lowercase", to_lowercase),
        ("Removing duplicates", remove_duplicates),
    ]
    enabled = (options.trim_whitespace, options.lowercase, options.remove_duplicates)
    return [stage for stage, flag in zip(stages, enabled, strict=True) if flag]


def normalize_values(values: list[str], options: ExtractorOptions) -> list[str]:
    """Apply the enabled normalization stages to ``values``.

    Parameters
    ----------
    values
        Values in scan order.
    options
        Extraction options carrying the stage flags.

    Returns
    -------
    list[str]
        New list; ``values`` is not modified.
    """
    result = list(values)
    for message, stage in normalization_stages(options):
        logger.info(message)
        result = stage(result)

    logger.debug("Normalized %d values into %d", len(values), len(result))
    return result
