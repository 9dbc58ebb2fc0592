from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

import pytest
from openpyxl import Workbook

# Ensure project root is on sys.path for absolute imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from sheetstudio.config import AppConfig


def build_workbook_bytes(sheets: Dict[str, Sequence[Sequence[Any]]]) -> bytes:
    """Write ``sheets`` (name -> rows) into an in-memory XLSX document."""

    workbook = Workbook()
    workbook.remove(workbook.active)
    for name, rows in sheets.items():
        worksheet = workbook.create_sheet(title=name)
        for row in rows:
            worksheet.append(list(row))
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_workbook() -> Callable[[Dict[str, Sequence[Sequence[Any]]]], bytes]:
    return build_workbook_bytes


@pytest.fixture
def sales_sheets() -> Dict[str, List[List[Any]]]:
    return {
        "Продажи": [
            ["Month", "Sales", "Costs"],
            ["Jan", 100, 40],
            ["Feb", "n/a", 35],
            ["Mar", 130.5, None],
        ],
        "Notes": [
            ["Comment"],
            ["text only"],
        ],
        "Regions": [
            ["Region", "Q1", "Q2"],
            ["North", 10, 12],
            ["South", 7, 9],
        ],
    }


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()
