"""Command line interface for the Sheet Studio ingest pipeline."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from tabulate import tabulate

from .config import AppConfig, load_config
from .errors import DecodeFailure, FormatRejected
from .export import write_export
from .io import ensure_accepted_format
from .sampling import chart_records
from .state import ViewerState

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect a spreadsheet, print its chart sample and optionally re-export a sheet"
    )
    parser.add_argument("file", type=Path, help="Spreadsheet to load (.xlsx/.xls)")
    parser.add_argument("--sheet", help="Sheet to activate instead of the first one")
    parser.add_argument("--export", type=Path, help="Write the active sheet to this file or directory")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument("--max-rows", type=int, help="Number of data rows sampled for the chart")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING)")
    parser.add_argument("--quiet", action="store_true", help="Suppress console summary output")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        _apply_overrides(config, args)
    except Exception as exc:  # pragma: no cover - CLI validation
        logging.basicConfig(level=logging.INFO)
        logger.error("Failed to load configuration: %s", exc)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
    )

    file_path = Path(args.file).expanduser()
    state = ViewerState(config=config)
    try:
        ensure_accepted_format(file_path.name, config.ingest.accepted_extensions)
        state.ingest(_read_bytes(file_path), file_path.name)
    except FormatRejected as exc:
        logger.error("%s", exc)
        return 2
    except DecodeFailure as exc:
        logger.error("%s", exc)
        return 1

    if args.sheet:
        try:
            state.select_sheet(args.sheet)
        except KeyError:
            logger.error(
                "Sheet '%s' not found; available sheets: %s",
                args.sheet,
                ", ".join(state.sheet_names),
            )
            return 1

    if args.export:
        name, payload = state.export()
        try:
            write_export(payload, args.export, name)
        except OSError as exc:
            logger.exception("Failed to export sheet: %s", exc)
            return 1

    if not args.quiet:
        _print_summary(state)

    return 0


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    if args.max_rows is not None:
        if args.max_rows <= 0:
            raise ValueError("--max-rows must be a positive integer")
        config.chart.max_rows = args.max_rows

    if args.log_level:
        config.logging.level = args.log_level.upper()


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise DecodeFailure(path.name, str(exc)) from exc


def _print_summary(state: ViewerState) -> None:
    sheets = [
        {
            "sheet": name,
            "rows": len(state.workbook.sheets[name]),
            "active": "*" if name == state.active_sheet else "",
        }
        for name in state.sheet_names
    ]
    print(f"Workbook: {state.file_name}")
    print(tabulate(sheets, headers="keys", tablefmt="github"))

    print(f"\n=== Chart sample: {state.active_sheet} ===")
    records = chart_records(state.chart_sample)
    if not records:
        print("Not enough numeric data for a chart.")
        return
    print(tabulate(records, headers="keys", tablefmt="github"))


if __name__ == "__main__":  # pragma: no cover - manual execution entry point
    raise SystemExit(main())
