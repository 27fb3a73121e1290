"""Typer-based command line interface: compare interest products from two JSON files."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from core.config import DEFAULT_CATALOG_FILE, DEFAULT_SNAPSHOT_FILE, ComparisonConfig
from core.errors import DataLoadError
from core.log import setup_logging
from engine.runner import run_pipeline

from .report import render_tables, write_csv

app = typer.Typer(help="A tool to compare financial products and interests.", add_completion=False)
console = Console()
logger = logging.getLogger(__name__)


def run(config: ComparisonConfig) -> None:
    """Load, compute and emit according to `config`. Exits with status 1 on load failure."""
    try:
        result = run_pipeline(config)
    except DataLoadError as exc:
        if exc.path == config.snapshot_file:
            logger.error("Error loading JSON data: %s", exc.reason)
        else:
            logger.error("Error loading products data: %s", exc.reason)
        raise typer.Exit(code=1)

    if config.csv_output:
        write_csv(result)
    else:
        render_tables(result, console)


@app.command()
def compare(
    jsondata: Path = typer.Option(DEFAULT_SNAPSHOT_FILE, "--jsondata", help="path to JSON data file"),
    productsdata: Path = typer.Option(
        DEFAULT_CATALOG_FILE, "--productsdata", help="path to products JSON file"
    ),
    csv: bool = typer.Option(False, "--csv", help="output tables in CSV format"),
    log_level: str = typer.Option("WARNING", "--log-level", help="diagnostic verbosity (stderr)"),
) -> None:
    """Compare the held product month by month, then against every product on offer."""
    try:
        config = ComparisonConfig(
            snapshot_file=jsondata,
            catalog_file=productsdata,
            output_format="csv" if csv else "table",
            log_level=log_level,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")
    setup_logging(config.log_level)
    run(config)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
