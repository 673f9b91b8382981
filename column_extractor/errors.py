"""Exceptions raised by the extraction pipeline.

Every error is fatal for the run that raised it; callers catch
:class:`ExtractionError` to handle all of them at once.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ExtractionError",
    "FetchError",
    "InvalidOccurrenceTypeError",
    "MissingOccurrenceError",
    "MissingRangeError",
    "ParseError",
    "SheetNotFoundError",
    "WriteError",
]


class ExtractionError(RuntimeError):
    """Base class for every failure of an extraction run."""


class FetchError(ExtractionError):
    """Download failed at the transport level or with a non-success status."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class ParseError(ExtractionError):
    """Downloaded payload is not a readable spreadsheet."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Could not parse spreadsheet from {source}: {reason}")


class SheetNotFoundError(ExtractionError):
    """Requested sheet is not in the workbook, or the workbook has no sheets."""

    def __init__(self, sheet_name: str, available: list[str]) -> None:
        self.sheet_name = sheet_name
        self.available = available
        super().__init__(f"Sheet '{sheet_name}' not found (available: {', '.join(available) or 'none'})")


class MissingRangeError(ExtractionError):
    """Selected sheet has no populated cells."""

    def __init__(self, sheet_name: str) -> None:
        self.sheet_name = sheet_name
        super().__init__(f"Missing used range in sheet '{sheet_name}'")


class MissingOccurrenceError(ExtractionError):
    """Occurrence cell next to a scanned value is absent."""

    def __init__(self, coordinate: str) -> None:
        self.coordinate = coordinate
        super().__init__(f"Missing occurrence at {coordinate}")


class InvalidOccurrenceTypeError(ExtractionError):
    """Occurrence cell next to a scanned value is not a number."""

    def __init__(self, coordinate: str, value: Any) -> None:
        self.coordinate = coordinate
        self.value = value
        super().__init__(f"Expecting number at {coordinate}, got {value!r}")


class WriteError(ExtractionError):
    """Output JSON file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write {path}: {reason}")
