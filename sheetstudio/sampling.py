"""Derive the compact chart sample from the first rows of a sheet."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd

MAX_SAMPLE_ROWS = 6
CATEGORY_LABEL = "Строка {index}"
SERIES_LABEL = "Значение {index}"


@dataclass
class ChartPoint:
    """One category of the chart with its numeric series values."""

    name: Any
    values: Dict[str, Any] = field(default_factory=dict)

    def as_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"name": self.name}
        record.update(self.values)
        return record


def is_numeric_value(value: Any) -> bool:
    """Return ``True`` for int/float scalars; booleans and numeric text are not numbers."""

    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _plain(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def resolve_series_label(headers: Sequence[Any], column: int, template: str = SERIES_LABEL) -> str:
    """Return the label of data ``column`` (1-based, after the category column)."""

    header = headers[column] if column < len(headers) else None
    if _is_blank(header):
        return template.format(index=column)
    return str(_plain(header))


def build_chart_sample(
    rows: Sequence[Sequence[Any]],
    max_rows: int = MAX_SAMPLE_ROWS,
    category_label: str = CATEGORY_LABEL,
    series_label: str = SERIES_LABEL,
) -> List[ChartPoint]:
    """Build the chart sample for a raw grid.

    Row ``0`` is the header. Up to ``max_rows`` following rows become chart
    categories named after their first cell. Only cells holding actual numbers
    are kept as series values; rows without any of them are dropped.
    """

    if len(rows) < 2:
        return []

    headers = list(rows[0])
    points: List[ChartPoint] = []
    for position, row in enumerate(rows[1 : max_rows + 1], start=1):
        row = list(row)
        first = row[0] if row else None
        name = category_label.format(index=position) if _is_blank(first) else _plain(first)
        point = ChartPoint(name=name)
        for column, value in enumerate(row[1:], start=1):
            if is_numeric_value(value):
                point.values[resolve_series_label(headers, column, series_label)] = _plain(value)
        points.append(point)

    return [point for point in points if point.values]


def chart_records(sample: Sequence[ChartPoint]) -> List[Dict[str, Any]]:
    return [point.as_record() for point in sample]


__all__ = [
    "CATEGORY_LABEL",
    "ChartPoint",
    "MAX_SAMPLE_ROWS",
    "SERIES_LABEL",
    "build_chart_sample",
    "chart_records",
    "is_numeric_value",
    "resolve_series_label",
]
