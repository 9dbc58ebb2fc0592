"""Grid presentation helpers: column letters and locale-formatted values."""

from __future__ import annotations

import math
import numbers
from typing import Any, List, Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from .sampling import is_numeric_value
from .workbook import Cell


def column_label(index: int) -> str:
    """Return the spreadsheet column letters for the 0-based ``index``."""

    return get_column_letter(index + 1)


def format_cell_value(value: Any) -> str:
    """Render a cell the way the grid shows it.

    Numbers use a non-breaking space as thousands separator, a comma as the
    decimal mark and at most three fraction digits. Everything else is shown
    as text; blanks stay blank.
    """

    if value is None:
        return ""
    if not is_numeric_value(value):
        return str(value)

    numeric = float(value)
    if math.isnan(numeric):
        return "–"
    if math.isinf(numeric):
        return "∞" if numeric > 0 else "-∞"

    if isinstance(value, numbers.Integral):
        text = f"{int(value):,}"
    elif numeric.is_integer() and abs(numeric) < 1e15:
        text = f"{int(numeric):,}"
    else:
        text = f"{numeric:,.3f}".rstrip("0").rstrip(".")
    return text.replace(",", "\u00A0").replace(".", ",")


def grid_to_frame(grid: Sequence[Sequence[Cell]]) -> pd.DataFrame:
    """Prepare a grid for display with lettered columns and 1-based row numbers."""

    width = max((len(row) for row in grid), default=0)
    body: List[List[str]] = []
    for row in grid:
        formatted = [format_cell_value(cell.value) for cell in row]
        formatted.extend([""] * (width - len(formatted)))
        body.append(formatted)

    frame = pd.DataFrame(body, columns=[column_label(idx) for idx in range(width)])
    frame.index = pd.RangeIndex(start=1, stop=len(body) + 1, name="#")
    return frame


__all__ = ["column_label", "format_cell_value", "grid_to_frame"]
