"""Configuration management for column-extractor.

This module centralizes file-system paths, environment variables, logging
setup, and the extraction options consumed by the pipeline.

Environment variables
---------------------
``DATA_DIR`` and ``LOGS_DIR`` override default directories and
``REQUEST_TIMEOUT`` sets the HTTP timeout in seconds. Directories are created
eagerly on import so downstream callers can rely on their existence.

Job files
---------
A job file is a JSON document listing extraction runs::

    {
      "jobs": [
        {"output": "fruits", "options": {"url": "https://...", "row": 2, "column": 1}}
      ]
    }

Option keys are accepted in snake_case or in the camelCase spelling used by
older job files (``sheetName``, ``minOccurrences``, ...).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("DATA_DIR", PROJECT_ROOT / "data"))
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))

# Ensure directories exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
LOGS_DIR.mkdir(parents=True, exist_ok=True)

# HTTP settings
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))


def setup_logging(name: str = "column_extractor") -> logging.Logger:
    """Configure a console+file logger if not already present.

    Parameters
    ----------
    name : str, optional
        Logger namespace; reused to avoid duplicate handlers.

    Returns
    -------
    logging.Logger
        Logger with INFO-level console handler and DEBUG-level file handler
        under ``LOGS_DIR``.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_format = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

        # File handler
        log_filename = f"{datetime.now(UTC).strftime('%Y-%m-%d')}_run.log"
        file_handler = logging.FileHandler(LOGS_DIR / log_filename)
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


def set_console_level(level: int) -> None:
    """Adjust the console threshold of every logger created by ``setup_logging``."""
    for logger_name in list(logging.root.manager.loggerDict):
        if not logger_name.startswith("column_extractor"):
            continue
        for handler in logging.getLogger(logger_name).handlers:
            if type(handler) is logging.StreamHandler:
                handler.setLevel(level)


# =============================================================================
# Extraction Options
# =============================================================================


@dataclass(frozen=True)
class ExtractorOptions:
    """Immutable settings for a single column extraction.

    Attributes
    ----------
    url : str
        Location of the spreadsheet document.
    row : int
        1-based row of the first cell, relative to the sheet's used range.
    column : int
        1-based column of the extracted values, relative to the used range.
    trim_whitespace : bool
        Strip leading/trailing whitespace from every value.
    lowercase : bool
        Fold every value to lowercase.
    remove_duplicates : bool
        Keep only the first occurrence of each value.
    sheet_name : str | None
        Sheet to read; ``None`` selects the first sheet.
    min_occurrences : float | None
        When set, rows whose occurrence count (the cell right of the value)
        is below this threshold are skipped.
    """

    url: str
    row: int = 1
    column: int = 1
    trim_whitespace: bool = True
    lowercase: bool = True
    remove_duplicates: bool = True
    sheet_name: str | None = None
    min_occurrences: float | None = None


DEFAULT_OPTIONS = ExtractorOptions(url="")

# camelCase spellings accepted in job files
_OPTION_ALIASES = {
    "sheetName": "sheet_name",
    "minOccurrences": "min_occurrences",
    "trimWhitespaces": "trim_whitespace",
    "trimWhitespace": "trim_whitespace",
    "toLowerCase": "lowercase",
    "removeDuplicates": "remove_duplicates",
}


def build_options(overrides: dict[str, Any], defaults: ExtractorOptions = DEFAULT_OPTIONS) -> ExtractorOptions:
    """Merge a partial option mapping over the defaults and validate the result.

    Parameters
    ----------
    overrides : dict[str, Any]
        Option values keyed by field name or camelCase alias. ``None`` values
        for optional fields are kept as "unset".
    defaults : ExtractorOptions, optional
        Base options; ``DEFAULT_OPTIONS`` when omitted.

    Returns
    -------
    ExtractorOptions
        Fully populated options.

    Raises
    ------
    ValueError
        If a key is unknown, ``url`` is empty, ``row``/``column`` are below 1
        or ``min_occurrences`` is negative.
    """
    known = {f.name for f in fields(ExtractorOptions)}
    normalized: dict[str, Any] = {}
    for key, value in overrides.items():
        field_name = _OPTION_ALIASES.get(key, key)
        if field_name not in known:
            msg = f"Unknown option: {key}"
            raise ValueError(msg)
        normalized[field_name] = value

    options = replace(defaults, **normalized)
    validate_options(options)
    return options


def validate_options(options: ExtractorOptions) -> None:
    """Raise ``ValueError`` when ``options`` cannot drive an extraction."""
    if not options.url:
        msg = "Option 'url' is required"
        raise ValueError(msg)
    for name in ("row", "column"):
        value = getattr(options, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            msg = f"Option '{name}' must be a positive integer, got {value!r}"
            raise ValueError(msg)
    threshold = options.min_occurrences
    if threshold is not None and (
        isinstance(threshold, bool) or not isinstance(threshold, int | float) or threshold < 0
    ):
        msg = f"Option 'min_occurrences' must be a non-negative number, got {threshold!r}"
        raise ValueError(msg)


# =============================================================================
# Job Files
# =============================================================================


@dataclass(frozen=True)
class ExtractionJob:
    """One extraction run: where to write and what to extract."""

    output: str
    options: ExtractorOptions


def load_jobs(path: Path) -> list[ExtractionJob]:
    """Load extraction jobs from a JSON job file.

    Parameters
    ----------
    path : Path
        Job file location.

    Returns
    -------
    list[ExtractionJob]
        Jobs in file order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    json.JSONDecodeError
        If the file is not valid JSON.
    ValueError
        If the document or one of its jobs is malformed.
    """
    if not path.exists():
        msg = f"Job file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open(encoding="utf-8") as f:
        document = json.load(f)

    entries = document.get("jobs") if isinstance(document, dict) else None
    if not isinstance(entries, list):
        msg = f"Job file {path} must contain a 'jobs' list"
        raise ValueError(msg)

    jobs = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("output") or not isinstance(entry.get("options"), dict):
            msg = f"Job #{index} in {path} needs an 'output' name and an 'options' object"
            raise ValueError(msg)
        jobs.append(ExtractionJob(output=str(entry["output"]), options=build_options(entry["options"])))

    return jobs
