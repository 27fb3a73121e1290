"""
Run configuration.
One explicit structure handed to the pipeline entry point; nothing is read
from globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

OutputFormat = Literal["table", "csv"]

DEFAULT_SNAPSHOT_FILE = Path("interest_data.json")
DEFAULT_CATALOG_FILE = Path("products_data.json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ComparisonConfig:
    snapshot_file: Path = DEFAULT_SNAPSHOT_FILE
    catalog_file: Path = DEFAULT_CATALOG_FILE
    output_format: OutputFormat = "table"

    # diagnostics go to stderr; WARNING shows the per-row skips
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.output_format not in ("table", "csv"):
            raise ValueError(
                f"output_format must be 'table' or 'csv', got {self.output_format!r}"
            )
        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        object.__setattr__(self, "log_level", level)
        object.__setattr__(self, "snapshot_file", Path(self.snapshot_file))
        object.__setattr__(self, "catalog_file", Path(self.catalog_file))

    @property
    def csv_output(self) -> bool:
        return self.output_format == "csv"
