"""Excel export of the active sheet."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, List, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

EXPORT_EXTENSION = ".xlsx"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_filename(
    original_name: str | None,
    suffix: str = "_edited",
    default_name: str = "export",
) -> str:
    """Return ``<base name><suffix>.xlsx`` for the uploaded file name."""

    stem = Path(str(original_name)).stem.strip() if original_name else ""
    return f"{stem or default_name}{suffix}{EXPORT_EXTENSION}"


def grid_to_excel_bytes(rows: Sequence[Sequence[Any]], sheet_name: str) -> bytes:
    """Serialize raw rows into a single-sheet XLSX document.

    Rows are written verbatim without header or index; empty strings become
    blank cells so that reading the file back yields the same grid. Text that
    starts with ``=`` stays text instead of turning into a formula.
    """

    body: List[List[Any]] = [
        [None if isinstance(value, str) and value == "" else value for value in row]
        for row in rows
    ]
    buffer = io.BytesIO()
    safe_sheet = str(sheet_name)[:31] or "Data"
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame = pd.DataFrame(body, dtype=object)
        frame.to_excel(writer, index=False, header=False, sheet_name=safe_sheet)
        _keep_formula_like_text(writer.sheets[safe_sheet])
    buffer.seek(0)
    return buffer.getvalue()


def _keep_formula_like_text(worksheet) -> None:
    # openpyxl marks any string starting with "=" as a formula on assignment
    for row in worksheet.iter_rows():
        for cell in row:
            if cell.data_type == "f" and isinstance(cell.value, str):
                cell.data_type = "s"


def write_export(payload: bytes, destination: str | Path, file_name: str) -> Path:
    """Write exported bytes to ``destination``; directories receive ``file_name``."""

    target = Path(destination).expanduser()
    if target.is_dir():
        target = target / file_name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(payload)
    logger.info("Wrote %s (%d bytes)", target, len(payload))
    return target


__all__ = [
    "EXPORT_EXTENSION",
    "XLSX_MIME",
    "export_filename",
    "grid_to_excel_bytes",
    "write_export",
]
