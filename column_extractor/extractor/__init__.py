"""Extractor module: spreadsheet decoding and column scanning.

Usage:
    from column_extractor.extractor import decode_workbook, select_sheet, scan_column

    workbook = decode_workbook(content, source=url)
    sheet = select_sheet(workbook, options.sheet_name)
    values = scan_column(sheet, options)
"""

from column_extractor.extractor.column_scan import cell_ref, resolve_start, scan_column
from column_extractor.extractor.workbook import (
    CellValue,
    SheetView,
    SpreadsheetDocument,
    UsedRange,
    decode_workbook,
    select_sheet,
)

__all__ = [
    # Workbook access
    "CellValue",
    "SheetView",
    "SpreadsheetDocument",
    "UsedRange",
    # Column scan
    "cell_ref",
    "decode_workbook",
    "resolve_start",
    "scan_column",
    "select_sheet",
]
