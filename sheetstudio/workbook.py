from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class Cell:
    """Single spreadsheet value as read from the source file."""

    value: Any = ""
    formula: Optional[str] = None


Grid = List[List[Cell]]


def wrap_rows(rows: Sequence[Sequence[Any]]) -> Grid:
    return [[Cell(value=value) for value in row] for row in rows]


def unwrap_rows(grid: Sequence[Sequence[Cell]]) -> List[List[Any]]:
    """Return the raw scalar values of ``grid``; formula metadata is dropped."""

    return [[cell.value for cell in row] for row in grid]


@dataclass
class WorkbookData:
    """Container for parsed workbook data."""

    name: str
    sheets: Dict[str, Grid] = field(default_factory=dict)

    @property
    def sheet_names(self) -> List[str]:
        return list(self.sheets.keys())

    @property
    def first_sheet(self) -> str:
        return next(iter(self.sheets), "")

    def raw_rows(self, sheet: str) -> List[List[Any]]:
        return unwrap_rows(self.sheets[sheet])

    @classmethod
    def from_raw(cls, name: str, raw_sheets: Dict[str, List[List[Any]]]) -> "WorkbookData":
        return cls(
            name=name,
            sheets={sheet: wrap_rows(rows) for sheet, rows in raw_sheets.items()},
        )


__all__ = ["Cell", "Grid", "WorkbookData", "wrap_rows", "unwrap_rows"]
