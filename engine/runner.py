"""
Comparison runner — orchestrates loading, indexing, and the three table builders.

One pass, in order:
  1. Load snapshots and catalogs (fatal on unreadable or malformed input)
  2. Validate and index catalogs by (year, month)
  3. Month-by-month interest comparison
  4. Product comparison for the last snapshot's month
  5. Product comparisons for every later catalog month

Steps 3-5 are independent of each other: 4 and 5 each derive the same capital
from the last snapshot, so they may run in any order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.config import ComparisonConfig
from core.schema import MonthlyCatalog, MonthlySnapshot
from data_prep.catalog_index import build_catalog_index
from data_prep.loader import load_catalogs, load_snapshots
from data_prep.validators import validate_inputs

from .comparison import ProductComparison, compare_current_month
from .diagnostics import Diagnostics
from .future import project_future
from .projection import project_interest

logger = logging.getLogger(__name__)


@dataclass
class ComparisonResult:
    """Everything the report emitter needs, plus the conditions met along the way."""
    interest_table: pd.DataFrame
    current_comparison: Optional[ProductComparison]
    future_comparisons: List[ProductComparison] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)


def run_comparison(
    snapshots: Sequence[MonthlySnapshot],
    catalogs: Sequence[MonthlyCatalog],
) -> ComparisonResult:
    """
    Run all three comparisons over already-loaded inputs.

    Returns
    -------
    ComparisonResult
        interest_table:     month-by-month rows (engine.projection)
        current_comparison: last-month product table, or None if unresolvable
        future_comparisons: one table per later catalog month, ascending
        diagnostics:        row/table-level conditions, in the order raised
    """
    diagnostics = Diagnostics()
    index = build_catalog_index(catalogs)

    interest_table = project_interest(snapshots, index, diagnostics)
    current = compare_current_month(snapshots, index, diagnostics)
    future = project_future(snapshots, index, diagnostics)

    return ComparisonResult(
        interest_table=interest_table,
        current_comparison=current,
        future_comparisons=future,
        diagnostics=list(diagnostics),
    )


def run_pipeline(config: ComparisonConfig) -> ComparisonResult:
    """
    Load both documents named by `config` and run the comparison.

    Raises core.errors.DataLoadError if either document cannot be read or
    does not match its schema.
    """
    snapshots = load_snapshots(config.snapshot_file)
    catalogs = load_catalogs(config.catalog_file)

    validation = validate_inputs(snapshots, catalogs)
    if validation.is_valid and not validation.warnings:
        logger.debug(validation.summary())
    else:
        logger.info("Input validation:\n%s", validation.summary())

    return run_comparison(snapshots, catalogs)
