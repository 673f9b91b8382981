"""column-extractor: turn one spreadsheet column into a JSON word list.

The package downloads a spreadsheet, reads the contiguous run of values below
a start cell, optionally trims, lowercases, deduplicates and filters them by
an occurrence count, and writes the result as a JSON array.

Architecture
------------
* ``scraper``: httpx downloads (sync and async).
* ``extractor``: openpyxl decoding, sheet selection and the column scan.
* ``transformer``: trim / lowercase / dedupe normalization stages.
* ``writer``: atomic ``<output>.json`` persistence.
* ``pipeline``: :class:`ColumnExtractor` tying the steps together.

Configuration
-------------
Paths default to the ``data/`` and ``logs/`` trees but respect ``DATA_DIR``
and ``LOGS_DIR`` overrides; ``REQUEST_TIMEOUT`` sets the HTTP timeout.

Examples
--------
Extract the second column of the "Nouns" sheet:

    >>> python -m column_extractor.main --url https://example.com/words.xlsx -o nouns -c 2 --sheet Nouns
"""

from column_extractor.config import ExtractionJob, ExtractorOptions, build_options, load_jobs
from column_extractor.errors import (
    ExtractionError,
    FetchError,
    InvalidOccurrenceTypeError,
    MissingOccurrenceError,
    MissingRangeError,
    ParseError,
    SheetNotFoundError,
    WriteError,
)
from column_extractor.pipeline import ColumnExtractor, run_jobs

__version__ = "0.1.0"
__all__ = [
    "ColumnExtractor",
    "ExtractionError",
    "ExtractionJob",
    "ExtractorOptions",
    "FetchError",
    "InvalidOccurrenceTypeError",
    "MissingOccurrenceError",
    "MissingRangeError",
    "ParseError",
    "SheetNotFoundError",
    "WriteError",
    "__version__",
    "build_options",
    "load_jobs",
    "run_jobs",
]
