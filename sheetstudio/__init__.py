"""Sheet Studio core package.

This package provides the building blocks of a browser-based spreadsheet
viewer: ingesting uploaded workbooks into sheet grids, deriving a compact chart
sample from the active sheet and exporting that sheet back to Excel. It powers
both the Streamlit application shipped with this repository and the command
line interface.
"""

from .charts import build_bar_chart, build_line_chart, chart_sample_to_frame, chart_series
from .config import (
    AppConfig,
    ChartConfig,
    ExportConfig,
    IngestConfig,
    LoggingConfig,
    load_config,
)
from .display import column_label, format_cell_value, grid_to_frame
from .errors import DecodeFailure, FormatRejected, SheetStudioError
from .export import export_filename, grid_to_excel_bytes, write_export
from .io import decode_workbook, ensure_accepted_format, is_accepted_file, read_workbook
from .notifications import Notification
from .sampling import ChartPoint, build_chart_sample, chart_records, is_numeric_value
from .state import ViewerState
from .workbook import Cell, Grid, WorkbookData, unwrap_rows, wrap_rows

__all__ = [
    "AppConfig",
    "Cell",
    "ChartConfig",
    "ChartPoint",
    "DecodeFailure",
    "ExportConfig",
    "FormatRejected",
    "Grid",
    "IngestConfig",
    "LoggingConfig",
    "Notification",
    "SheetStudioError",
    "ViewerState",
    "WorkbookData",
    "build_bar_chart",
    "build_chart_sample",
    "build_line_chart",
    "chart_records",
    "chart_sample_to_frame",
    "chart_series",
    "column_label",
    "decode_workbook",
    "ensure_accepted_format",
    "export_filename",
    "format_cell_value",
    "grid_to_excel_bytes",
    "grid_to_frame",
    "is_accepted_file",
    "is_numeric_value",
    "load_config",
    "read_workbook",
    "unwrap_rows",
    "wrap_rows",
    "write_export",
]
