"""Ingest helpers turning uploaded spreadsheet bytes into sheet grids."""

from __future__ import annotations

import datetime
import io
import logging
from typing import Any, Dict, Iterable, List, Sequence

import pandas as pd
from openpyxl.utils.datetime import to_excel

from .errors import DecodeFailure, FormatRejected
from .workbook import WorkbookData

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS: Sequence[str] = (".xlsx", ".xls")


def is_accepted_file(file_name: str, extensions: Iterable[str] = ACCEPTED_EXTENSIONS) -> bool:
    """Return ``True`` when ``file_name`` ends with one of ``extensions``."""

    name = str(file_name or "").strip().lower()
    return any(name.endswith(ext.lower()) for ext in extensions)


def ensure_accepted_format(
    file_name: str, extensions: Iterable[str] = ACCEPTED_EXTENSIONS
) -> None:
    extensions = tuple(extensions)
    if not is_accepted_file(file_name, extensions):
        logger.warning("Rejected '%s': unsupported file extension", file_name)
        raise FormatRejected(file_name, extensions)


def decode_workbook(data: bytes, file_name: str = "workbook") -> Dict[str, List[List[Any]]]:
    """Decode spreadsheet bytes into raw rows per sheet.

    Sheets keep the source order. Every sheet is read without a header row and
    without type or NA-string coercion, so the first row is row ``0`` and text
    such as ``"n/a"`` survives verbatim. Missing cells become ``""`` and
    date or time cells become Excel serial numbers.

    Raises
    ------
    DecodeFailure
        If the codec cannot parse ``data`` or the workbook holds no sheets.
    """

    try:
        with pd.ExcelFile(io.BytesIO(data)) as excel:
            sheets: Dict[str, List[List[Any]]] = {}
            for sheet_name in excel.sheet_names:
                frame = excel.parse(
                    sheet_name,
                    header=None,
                    dtype=object,
                    keep_default_na=False,
                    na_filter=False,
                )
                sheets[str(sheet_name)] = _frame_to_rows(frame)
                logger.debug(
                    "Decoded sheet '%s' with %d rows x %d columns",
                    sheet_name,
                    frame.shape[0],
                    frame.shape[1],
                )
    except Exception as exc:
        logger.warning("Failed to decode '%s': %s", file_name, exc)
        raise DecodeFailure(file_name, str(exc) or type(exc).__name__) from exc

    if not sheets:
        raise DecodeFailure(file_name, "workbook contains no sheets")
    return sheets


def read_workbook(
    data: bytes,
    file_name: str,
    extensions: Iterable[str] = ACCEPTED_EXTENSIONS,
) -> WorkbookData:
    """Validate, decode and wrap an uploaded spreadsheet."""

    ensure_accepted_format(file_name, extensions)
    raw_sheets = decode_workbook(data, file_name)
    workbook = WorkbookData.from_raw(file_name, raw_sheets)
    logger.info("Loaded '%s' with %d sheet(s)", file_name, len(workbook.sheets))
    return workbook


def _frame_to_rows(frame: pd.DataFrame) -> List[List[Any]]:
    if frame.empty:
        return []
    filled = frame.astype(object).where(frame.notna(), "")
    return [
        [_to_cell_value(value) for value in row]
        for row in filled.itertuples(index=False, name=None)
    ]


def _to_cell_value(value: Any) -> Any:
    """Return dates and times as Excel serial numbers, other values unchanged."""

    if isinstance(value, (datetime.date, datetime.time, datetime.timedelta)):
        return to_excel(value)
    return value


__all__ = [
    "ACCEPTED_EXTENSIONS",
    "decode_workbook",
    "ensure_accepted_format",
    "is_accepted_file",
    "read_workbook",
]
