"""Column scan: read values downward from a start cell until the column ends.

The user-facing start position is 1-based and relative to the sheet's used
range, so ``row=1, column=1`` is the top-left populated cell, not ``A1``.
:func:`resolve_start` is the only place that offset is computed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from openpyxl.utils import get_column_letter

from column_extractor.config import setup_logging
from column_extractor.errors import InvalidOccurrenceTypeError, MissingOccurrenceError
from column_extractor.utils.cells import is_numeric

if TYPE_CHECKING:
    from column_extractor.config import ExtractorOptions
    from column_extractor.extractor.workbook import SheetView, UsedRange

logger = setup_logging(__name__)

# Occurrence counts sit immediately right of the value column
OCCURRENCE_COLUMN_OFFSET = 1


def cell_ref(row: int, column: int) -> str:
    """Format a 1-based coordinate as an A1-style reference."""
    return f"{get_column_letter(column)}{row}"


def resolve_start(used: UsedRange, row: int, column: int) -> tuple[int, int]:
    """Translate a range-relative 1-based position to absolute sheet coordinates."""
    return used.start_row + row - 1, used.start_column + column - 1


def _occurrence_count(sheet: SheetView, row: int, column: int) -> float:
    occurrence_column = column + OCCURRENCE_COLUMN_OFFSET
    cell = sheet.cell(row, occurrence_column)
    if cell is None:
        raise MissingOccurrenceError(cell_ref(row, occurrence_column))
    if not is_numeric(cell.value):
        raise InvalidOccurrenceTypeError(cell_ref(row, occurrence_column), cell.value)
    return cell.value


def scan_column(sheet: SheetView, options: ExtractorOptions) -> list[str]:
    """Collect the contiguous run of values below the configured start cell.

    The scan stops at the first absent cell or empty display text, or after
    the last row of the used range. With a non-zero
    ``options.min_occurrences``, rows whose occurrence count is below the
    threshold are skipped and the scan carries on.

    Parameters
    ----------
    sheet : SheetView
        Sheet to read.
    options : ExtractorOptions
        Supplies ``row``, ``column`` and ``min_occurrences``.

    Returns
    -------
    list[str]
        Values in scan order, not yet normalized.

    Raises
    ------
    MissingRangeError
        If the sheet has no used range.
    MissingOccurrenceError
        If the threshold is non-zero and an occurrence cell is absent.
    InvalidOccurrenceTypeError
        If the threshold is non-zero and an occurrence cell is not numeric.
    """
    used = sheet.used_range()
    start_row, column = resolve_start(used, options.row, options.column)

    logger.info("Reading values")
    logger.debug("Scanning from %s down to row %d", cell_ref(start_row, column), used.end_row)

    values: list[str] = []
    skipped = 0
    for row in range(start_row, used.end_row + 1):
        cell = sheet.cell(row, column)
        if cell is None:
            break
        text = cell.text
        if not text:
            break

        # A threshold of 0 disables the occurrence check
        if options.min_occurrences:
            count = _occurrence_count(sheet, row, column)
            if count < options.min_occurrences:
                logger.debug("Skipping %s: %s occurrences", cell_ref(row, column), count)
                skipped += 1
                continue

        values.append(text)

    logger.debug("Read %d values (%d below occurrence threshold)", len(values), skipped)
    return values
