"""Spreadsheet decoding and sheet access.

Payloads are recognised by their leading bytes:

* ZIP (``PK\\x03\\x04``) - OOXML workbooks (``.xlsx``/``.xlsm``) via openpyxl
* OLE2 compound document - legacy ``.xls`` workbooks via xlrd
* anything else - delimited text (CSV/TSV) via the ``csv`` module

Every backend is loaded into the same three small concepts:

* :class:`SheetView` - a sheet queried by absolute (row, column)
* :class:`UsedRange` - the bounding box of populated cells
* :class:`CellValue` - display text plus the typed value of one cell

Coordinates are 1-based (row, column). Cells without a value are absent.
"""

from __future__ import annotations

import csv
import io
import re
import struct
import zipfile
from dataclasses import dataclass
from typing import Any

import xlrd
from openpyxl import load_workbook
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet
from xlrd.biffh import (
    XL_CELL_BLANK,
    XL_CELL_BOOLEAN,
    XL_CELL_DATE,
    XL_CELL_EMPTY,
    XL_CELL_ERROR,
    error_text_from_code,
)
from xlrd.compdoc import CompDocError
from xlrd.xldate import XLDateError, xldate_as_datetime

from column_extractor.config import setup_logging
from column_extractor.errors import MissingRangeError, ParseError, SheetNotFoundError
from column_extractor.utils.cells import display_text

logger = setup_logging(__name__)

__all__ = [
    "CellValue",
    "SheetView",
    "SpreadsheetDocument",
    "UsedRange",
    "decode_workbook",
    "select_sheet",
]

ZIP_MAGIC = b"PK\x03\x04"
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

# Name given to the single sheet of a delimited text document
CSV_SHEET_NAME = "Sheet1"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class CellValue:
    """Display text and typed value of a populated cell."""

    text: str
    value: Any


@dataclass(frozen=True)
class UsedRange:
    """Inclusive bounds of the populated area of a sheet."""

    start_row: int
    start_column: int
    end_row: int
    end_column: int

    @property
    def ref(self) -> str:
        """A1-style reference, e.g. ``"B2:D10"``."""
        start = f"{get_column_letter(self.start_column)}{self.start_row}"
        end = f"{get_column_letter(self.end_column)}{self.end_row}"
        return f"{start}:{end}"


class SheetView:
    """Read-only access to one sheet by absolute coordinate."""

    def __init__(self, name: str, cells: dict[tuple[int, int], CellValue]) -> None:
        self._name = name
        self._cells = cells

    @property
    def name(self) -> str:
        return self._name

    def used_range(self) -> UsedRange:
        """Return the bounding box of populated cells.

        Raises
        ------
        MissingRangeError
            If no cell in the sheet holds a value.
        """
        if not self._cells:
            raise MissingRangeError(self.name)

        rows = [row for row, _ in self._cells]
        columns = [column for _, column in self._cells]
        used = UsedRange(
            start_row=min(rows),
            start_column=min(columns),
            end_row=max(rows),
            end_column=max(columns),
        )
        logger.debug("Sheet '%s' used range: %s", self.name, used.ref)
        return used

    def cell(self, row: int, column: int) -> CellValue | None:
        """Return the cell at ``(row, column)`` or ``None`` when absent."""
        return self._cells.get((row, column))


@dataclass(frozen=True)
class SpreadsheetDocument:
    """Decoded sheets in declaration order."""

    sheets: dict[str, SheetView]
    format: str
    source: str = "<bytes>"

    @property
    def sheetnames(self) -> list[str]:
        return list(self.sheets)


# =============================================================================
# OOXML (openpyxl)
# =============================================================================


def _openpyxl_cells(ws: Worksheet) -> dict[tuple[int, int], CellValue]:
    # Bounds are read before iterating; iter_rows creates the cells it visits
    bounds = {
        "min_row": ws.min_row,
        "max_row": ws.max_row,
        "min_col": ws.min_column,
        "max_col": ws.max_column,
    }
    cells: dict[tuple[int, int], CellValue] = {}
    for row in ws.iter_rows(**bounds):
        for cell in row:
            if cell.value is None:
                continue
            cells[(cell.row, cell.column)] = CellValue(text=display_text(cell.value), value=cell.value)
    return cells


def _read_ooxml(content: bytes, source: str) -> SpreadsheetDocument:
    try:
        wb = load_workbook(io.BytesIO(content), data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, OSError, SyntaxError) as err:
        # SyntaxError covers malformed part XML (ElementTree and lxml parse errors)
        raise ParseError(source, str(err) or type(err).__name__) from err

    sheets = {}
    for name in wb.sheetnames:
        sheet = wb[name]
        # Chartsheets have no cell grid
        sheets[name] = SheetView(name, _openpyxl_cells(sheet) if isinstance(sheet, Worksheet) else {})
    return SpreadsheetDocument(sheets=sheets, format="xlsx", source=source)


# =============================================================================
# Legacy XLS (xlrd)
# =============================================================================


def _xlrd_value(cell: Any, datemode: int) -> Any:
    """Convert an xlrd cell to a Python value; ``None`` for empty cells."""
    if cell.ctype in (XL_CELL_EMPTY, XL_CELL_BLANK):
        return None
    if cell.ctype == XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == XL_CELL_ERROR:
        return error_text_from_code.get(cell.value, "#ERR!")
    if cell.ctype == XL_CELL_DATE:
        try:
            return xldate_as_datetime(cell.value, datemode)
        except XLDateError:
            return cell.value
    return cell.value


def _read_xls(content: bytes, source: str) -> SpreadsheetDocument:
    try:
        book = xlrd.open_workbook(file_contents=content)
    except (xlrd.XLRDError, CompDocError, struct.error, ValueError, IndexError, KeyError) as err:
        raise ParseError(source, str(err) or type(err).__name__) from err

    sheets = {}
    for sheet in book.sheets():
        cells: dict[tuple[int, int], CellValue] = {}
        for row_index in range(sheet.nrows):
            for col_index, xl_cell in enumerate(sheet.row(row_index)):
                value = _xlrd_value(xl_cell, book.datemode)
                if value is None:
                    continue
                cells[(row_index + 1, col_index + 1)] = CellValue(text=display_text(value), value=value)
        sheets[sheet.name] = SheetView(sheet.name, cells)
    return SpreadsheetDocument(sheets=sheets, format="xls", source=source)


# =============================================================================
# Delimited text (csv)
# =============================================================================


def _detect_csv_delimiter(sample: str) -> str:
    candidates = [",", "\t", ";", "|"]
    line = next((line for line in sample.splitlines() if line.strip()), "")
    if not line:
        return ","
    scores = {delimiter: line.count(delimiter) for delimiter in candidates}
    best = max(scores, key=scores.get)  # type: ignore[arg-type]
    return best if scores.get(best, 0) > 0 else ","


def _csv_value(text: str) -> Any:
    """Numbers become int/float so occurrence counts compare numerically."""
    stripped = text.strip()
    if _INTEGER_RE.match(stripped):
        return int(stripped)
    if _NUMBER_RE.match(stripped):
        return float(stripped)
    return text


def _read_csv(content: bytes, source: str) -> SpreadsheetDocument:
    try:
        decoded = content.decode("utf-8-sig")
    except UnicodeDecodeError as err:
        raise ParseError(source, f"not a spreadsheet or UTF-8 text ({err.reason})") from err
    if decoded.lstrip().startswith("<"):
        raise ParseError(source, "markup documents are not supported")

    delimiter = _detect_csv_delimiter(decoded[:4096])
    cells: dict[tuple[int, int], CellValue] = {}
    try:
        for row_index, row in enumerate(csv.reader(io.StringIO(decoded), delimiter=delimiter), start=1):
            for col_index, text in enumerate(row, start=1):
                if text == "":
                    continue
                cells[(row_index, col_index)] = CellValue(text=text, value=_csv_value(text))
    except csv.Error as err:
        raise ParseError(source, str(err)) from err

    return SpreadsheetDocument(sheets={CSV_SHEET_NAME: SheetView(CSV_SHEET_NAME, cells)}, format="csv", source=source)


def decode_workbook(content: bytes, source: str = "<bytes>") -> SpreadsheetDocument:
    """Parse spreadsheet bytes into a :class:`SpreadsheetDocument`.

    Parameters
    ----------
    content : bytes
        Raw ``.xlsx``/``.xlsm``, ``.xls`` or delimited text payload.
    source : str, optional
        Label for error messages (usually the URL).

    Returns
    -------
    SpreadsheetDocument
        Sheets in declaration order. Formula cells carry their cached results.

    Raises
    ------
    ParseError
        If ``content`` is empty or not a readable spreadsheet.
    """
    logger.info("Parsing file")
    if not content:
        raise ParseError(source, "empty payload")

    if content.startswith(ZIP_MAGIC):
        document = _read_ooxml(content, source)
    elif content.startswith(OLE2_MAGIC):
        document = _read_xls(content, source)
    else:
        document = _read_csv(content, source)

    logger.debug("Decoded %s document with sheets %s", document.format, document.sheetnames)
    return document


def select_sheet(document: SpreadsheetDocument, sheet_name: str | None = None) -> SheetView:
    """Pick ``sheet_name`` or, when ``None``, the first sheet in declaration order.

    Raises
    ------
    SheetNotFoundError
        If ``sheet_name`` is not in the document.
    """
    names = document.sheetnames
    if not names:
        raise SheetNotFoundError(sheet_name or "<first>", names)

    target = names[0] if sheet_name is None else sheet_name
    if target not in document.sheets:
        raise SheetNotFoundError(target, names)

    logger.debug("Selected sheet '%s'", target)
    return document.sheets[target]
