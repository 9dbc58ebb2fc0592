"""Configuration loading utilities for Sheet Studio."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

DEFAULT_CONFIG_PATH = Path("config") / "config.yaml"

DEFAULT_PALETTE = ["#3B82F6", "#10B981", "#F59E0B", "#EF4444", "#8B5CF6", "#EC4899"]


@dataclass
class IngestConfig:
    """File types accepted at the upload boundary."""

    accepted_extensions: List[str] = field(default_factory=lambda: [".xlsx", ".xls"])


@dataclass
class ChartConfig:
    """Settings for the chart sample and the rendered figures."""

    max_rows: int = 6
    category_label: str = "Строка {index}"
    series_label: str = "Значение {index}"
    palette: List[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    height: int = 300


@dataclass
class ExportConfig:
    """Naming of the exported workbook."""

    suffix: str = "_edited"
    default_name: str = "export"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass
class AppConfig:
    """Container for all configuration used by the viewer and the CLI."""

    ingest: IngestConfig = field(default_factory=IngestConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Optional[str | Path] = None) -> AppConfig:
    """Load :class:`AppConfig` from a YAML file.

    Parameters
    ----------
    path:
        Location of the YAML file. When omitted the built-in defaults are
        returned without touching the filesystem.

    Raises
    ------
    FileNotFoundError
        If ``path`` points to a file that does not exist.
    ValueError
        If a section is malformed or carries unknown keys.
    """

    if path is None:
        return AppConfig()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file '{config_path}' does not exist")

    with config_path.open("r", encoding="utf-8") as stream:
        raw_config = yaml.safe_load(stream) or {}

    if not isinstance(raw_config, Mapping):
        raise ValueError("Configuration root must be a mapping")

    ingest = IngestConfig(**_section(raw_config, "ingest", IngestConfig))
    ingest.accepted_extensions = _normalise_extensions(ingest.accepted_extensions)

    chart = ChartConfig(**_section(raw_config, "chart", ChartConfig))
    if int(chart.max_rows) <= 0:
        raise ValueError("chart.max_rows must be a positive integer")
    chart.max_rows = int(chart.max_rows)
    if not chart.palette:
        raise ValueError("chart.palette must list at least one color")
    chart.palette = [str(color) for color in chart.palette]

    export = ExportConfig(**_section(raw_config, "export", ExportConfig))
    logging_config = LoggingConfig(**_section(raw_config, "logging", LoggingConfig))
    logging_config.level = str(logging_config.level).upper()

    return AppConfig(ingest=ingest, chart=chart, export=export, logging=logging_config)


def _section(raw_config: Mapping[str, Any], name: str, schema: type) -> Dict[str, Any]:
    section = raw_config.get(name) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"Configuration section '{name}' must be a mapping")

    known = {field_info.name for field_info in fields(schema)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(
            f"Unknown keys in configuration section '{name}': {', '.join(unknown)}"
        )
    return dict(section)


def _normalise_extensions(values: Any) -> List[str]:
    if isinstance(values, str):
        values = [values]
    extensions: List[str] = []
    for value in values or []:
        text = str(value).strip().lower()
        if not text:
            continue
        if not text.startswith("."):
            text = "." + text
        if text not in extensions:
            extensions.append(text)
    if not extensions:
        raise ValueError("ingest.accepted_extensions must list at least one extension")
    return extensions


__all__ = [
    "AppConfig",
    "ChartConfig",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_PALETTE",
    "ExportConfig",
    "IngestConfig",
    "LoggingConfig",
    "load_config",
]
