"""Viewer state shared by the Streamlit app and the command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import AppConfig
from .errors import DecodeFailure, FormatRejected
from .export import export_filename, grid_to_excel_bytes
from .io import read_workbook
from .notifications import (
    Notification,
    export_succeeded,
    format_rejected,
    upload_failed,
    upload_succeeded,
)
from .sampling import ChartPoint, build_chart_sample
from .workbook import Grid, WorkbookData

logger = logging.getLogger(__name__)


@dataclass
class ViewerState:
    """Loaded workbook, active sheet and the chart sample derived from it.

    A successful :meth:`ingest` replaces all three at once; a failed one leaves
    them untouched. The chart sample is recomputed whenever the active sheet
    changes and is never cached per sheet.
    """

    config: AppConfig = field(default_factory=AppConfig)
    workbook: Optional[WorkbookData] = None
    active_sheet: str = ""
    chart_sample: List[ChartPoint] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return bool(self.workbook and self.workbook.sheets)

    @property
    def file_name(self) -> str:
        return self.workbook.name if self.workbook else ""

    @property
    def sheet_names(self) -> List[str]:
        return self.workbook.sheet_names if self.workbook else []

    @property
    def current_grid(self) -> Grid:
        if not self.workbook or self.active_sheet not in self.workbook.sheets:
            return []
        return self.workbook.sheets[self.active_sheet]

    def ingest(self, data: bytes, file_name: str) -> WorkbookData:
        """Decode ``data`` and make its first sheet active.

        Raises
        ------
        FormatRejected
            If ``file_name`` lacks an accepted extension; nothing is decoded.
        DecodeFailure
            If the bytes cannot be parsed.
        """

        workbook = read_workbook(data, file_name, self.config.ingest.accepted_extensions)
        first_sheet = workbook.first_sheet
        chart_sample = self._sample(workbook.raw_rows(first_sheet))

        self.workbook, self.active_sheet, self.chart_sample = workbook, first_sheet, chart_sample
        logger.debug("Active sheet '%s' (%d chart points)", first_sheet, len(chart_sample))
        return workbook

    def select_sheet(self, name: str) -> List[ChartPoint]:
        if not self.workbook or name not in self.workbook.sheets:
            raise KeyError(f"Sheet '{name}' is not loaded")
        self.active_sheet = name
        self.chart_sample = self._sample(self.workbook.raw_rows(name))
        logger.debug("Switched to sheet '%s' (%d chart points)", name, len(self.chart_sample))
        return self.chart_sample

    def export(self) -> Tuple[str, bytes]:
        """Return the export file name and XLSX bytes of the active sheet."""

        if not self.has_data or not self.active_sheet:
            raise ValueError("No active sheet to export")
        export_cfg = self.config.export
        name = export_filename(self.file_name, export_cfg.suffix, export_cfg.default_name)
        payload = grid_to_excel_bytes(self.workbook.raw_rows(self.active_sheet), self.active_sheet)
        logger.info("Exported sheet '%s' as %s", self.active_sheet, name)
        return name, payload

    def handle_upload(self, data: bytes, file_name: str) -> Notification:
        """Ingest an upload and describe the outcome for the user."""

        try:
            self.ingest(data, file_name)
        except FormatRejected as exc:
            return format_rejected(exc.accepted)
        except DecodeFailure as exc:
            logger.warning("Upload of '%s' failed: %s", file_name, exc.reason)
            return upload_failed()
        return upload_succeeded(file_name)

    def handle_export(self) -> Tuple[str, bytes, Notification]:
        name, payload = self.export()
        return name, payload, export_succeeded()

    def _sample(self, rows) -> List[ChartPoint]:
        chart_cfg = self.config.chart
        return build_chart_sample(
            rows,
            max_rows=chart_cfg.max_rows,
            category_label=chart_cfg.category_label,
            series_label=chart_cfg.series_label,
        )


__all__ = ["ViewerState"]
