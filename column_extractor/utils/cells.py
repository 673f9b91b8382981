"""Cell value helpers shared by the workbook reader and the column scan."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any


def display_text(value: Any) -> str:
    """Render a typed cell value the way a spreadsheet shows it.

    Whitespace is preserved; trimming is a separate normalization step.

    Examples
    --------
    - ``"Apple "`` -> ``"Apple "``
    - ``5.0`` -> ``"5"``
    - ``2.5`` -> ``"2.5"``
    - ``0.1 + 0.2`` -> ``"0.3"``
    - ``True`` -> ``"TRUE"``
    - ``None`` -> ``""``

    Parameters
    ----------
    value
        Raw value as loaded by openpyxl.

    Returns
    -------
    str
        Display string, empty when the cell holds nothing.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        # General number format: at most 11 significant digits
        return str(int(value)) if value.is_integer() else format(value, ".11g")
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ", timespec="seconds")
    if isinstance(value, date | time):
        return value.isoformat()
    # Rich-text objects from openpyxl expose the concatenated text via str()
    return str(value)


def is_numeric(value: Any) -> bool:
    """Return ``True`` for int/float cell values (booleans excluded)."""
    return isinstance(value, int | float) and not isinstance(value, bool)
