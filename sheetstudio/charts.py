"""Plotly figures drawn from the chart sample."""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .config import ChartConfig
from .sampling import ChartPoint

SAMPLE_COLUMNS = ["name", "series", "value"]


def chart_series(sample: Sequence[ChartPoint]) -> List[str]:
    """Return series labels in first-seen order across the sample."""

    labels: List[str] = []
    for point in sample:
        for label in point.values:
            if label not in labels:
                labels.append(label)
    return labels


def chart_sample_to_frame(sample: Sequence[ChartPoint]) -> pd.DataFrame:
    """Flatten the sample into long format; absent series keys produce no row."""

    records = [
        {"name": str(point.name), "series": label, "value": value}
        for point in sample
        for label, value in point.values.items()
    ]
    return pd.DataFrame(records, columns=SAMPLE_COLUMNS)


def _category_order(sample: Sequence[ChartPoint]) -> List[str]:
    order: List[str] = []
    for point in sample:
        name = str(point.name)
        if name not in order:
            order.append(name)
    return order


def build_bar_chart(sample: Sequence[ChartPoint], config: Optional[ChartConfig] = None) -> go.Figure:
    config = config or ChartConfig()
    frame = chart_sample_to_frame(sample)
    fig = px.bar(
        frame,
        x="name",
        y="value",
        color="series",
        barmode="group",
        color_discrete_sequence=config.palette,
        category_orders={"name": _category_order(sample), "series": chart_series(sample)},
        height=config.height,
    )
    return _apply_layout(fig)


def build_line_chart(sample: Sequence[ChartPoint], config: Optional[ChartConfig] = None) -> go.Figure:
    config = config or ChartConfig()
    frame = chart_sample_to_frame(sample)
    fig = px.line(
        frame,
        x="name",
        y="value",
        color="series",
        markers=True,
        line_shape="spline",
        color_discrete_sequence=config.palette,
        category_orders={"name": _category_order(sample), "series": chart_series(sample)},
        height=config.height,
    )
    fig.update_traces(line={"width": 2})
    return _apply_layout(fig)


def _apply_layout(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        xaxis_title=None,
        yaxis_title=None,
        legend_title_text=None,
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
    )
    fig.update_xaxes(type="category", tickfont={"size": 12})
    fig.update_yaxes(tickfont={"size": 12}, gridcolor="#e5e7eb", griddash="dash")
    return fig


__all__ = [
    "build_bar_chart",
    "build_line_chart",
    "chart_sample_to_frame",
    "chart_series",
]
