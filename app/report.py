"""
Report emitter — renders computed comparison rows as rich tables or CSV.

The engine hands over numeric frames; everything here is presentation:
2-decimal formatting, "%" on rates, header wrapping, and colour annotations.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

import pandas as pd
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.schema import (
    INTEREST_COMPARISON_COLUMNS,
    INTEREST_FIELDS,
    PRODUCT_COMPARISON_COLUMNS,
    PRODUCT_FIELDS,
    PRODUCT_FLAGS,
)
from core.utils import format_amount, format_rate, require_columns
from engine.comparison import ProductComparison
from engine.runner import ComparisonResult

INTEREST_TITLE = "Interest Comparison Table:"

BEST_STYLE = "green"
NEGATIVE_STYLE = "red"
SMALL_POSITIVE_STYLE = "yellow"
CURRENT_STYLE = "bright_yellow"

# Year and Month are left-aligned and never coloured.
_INTEREST_TEXT_COLUMNS = 2
_NET_GAIN_COLUMN = PRODUCT_COMPARISON_COLUMNS.index("Net Gain")


def format_header(header: str) -> str:
    """Put each header word on its own line for compact columns."""
    return header.replace(" ", "\n")


def format_interest_table(df: pd.DataFrame) -> pd.DataFrame:
    """Month-by-month rows as display strings under INTEREST_COMPARISON_COLUMNS."""
    require_columns(df, INTEREST_FIELDS)
    out = pd.DataFrame(index=df.index)
    out["Year"] = df["year"].map(lambda y: f"{int(y)}")
    out["Month"] = df["month"].astype(str)
    out["Plan Rate"] = df["annual_rate"].map(format_rate)
    for field, column in zip(INTEREST_FIELDS[3:], INTEREST_COMPARISON_COLUMNS[3:]):
        out[column] = df[field].map(format_amount)
    return out.reset_index(drop=True)


def format_product_table(df: pd.DataFrame) -> pd.DataFrame:
    """Product comparison rows as display strings under PRODUCT_COMPARISON_COLUMNS."""
    require_columns(df, PRODUCT_FIELDS)
    out = pd.DataFrame(index=df.index)
    out["Product"] = df["product"].astype(str)
    out["Annual Rate"] = df["annual_rate"].map(format_rate)
    out["Monthly Cost"] = df["monthly_cost"].map(format_amount)
    out["Projected Interest"] = df["projected_interest"].map(format_amount)
    out["Net Gain"] = df["net_gain"].map(format_amount)
    return out.reset_index(drop=True)


def _value_style(text: str) -> Optional[str]:
    """Colour for a formatted number: red below zero, yellow for (0, 1)."""
    try:
        value = float(text.rstrip("%"))
    except ValueError:
        return None
    if value < 0:
        return NEGATIVE_STYLE
    if 0 < value < 1:
        return SMALL_POSITIVE_STYLE
    return None


def _styled(text: str, style: Optional[str]) -> Text:
    return Text(text, style=style or "")


def build_interest_table(df: pd.DataFrame) -> Table:
    display = format_interest_table(df)
    table = Table(show_lines=False)
    for i, column in enumerate(INTEREST_COMPARISON_COLUMNS):
        justify = "left" if i < _INTEREST_TEXT_COLUMNS else "right"
        table.add_column(format_header(column), justify=justify)

    for row in display.itertuples(index=False):
        table.add_row(*[
            _styled(cell, None if i < _INTEREST_TEXT_COLUMNS else _value_style(cell))
            for i, cell in enumerate(row)
        ])
    return table


def build_product_table(comparison: ProductComparison) -> Table:
    rows = comparison.rows
    require_columns(rows, PRODUCT_FLAGS)
    display = format_product_table(rows)

    table = Table(show_lines=False)
    for i, column in enumerate(PRODUCT_COMPARISON_COLUMNS):
        table.add_column(format_header(column), justify="left" if i == 0 else "right")

    for cells, flags in zip(display.itertuples(index=False), rows[list(PRODUCT_FLAGS)].itertuples(index=False)):
        styles = [None] * len(cells)
        if flags.is_best:
            styles[_NET_GAIN_COLUMN] = BEST_STYLE
        elif flags.is_negative_gain:
            styles[_NET_GAIN_COLUMN] = NEGATIVE_STYLE
        if flags.is_current:
            # whole row highlighted; overrides the net gain colour
            styles = [CURRENT_STYLE] * len(cells)
        table.add_row(*[_styled(cell, style) for cell, style in zip(cells, styles)])
    return table


def _product_tables(result: ComparisonResult) -> List[ProductComparison]:
    tables = []
    if result.current_comparison is not None:
        tables.append(result.current_comparison)
    tables.extend(result.future_comparisons)
    return tables


def render_tables(result: ComparisonResult, console: Optional[Console] = None) -> None:
    """Print the interest table and every product table to the console."""
    console = console or Console()
    console.print(INTEREST_TITLE)
    console.print(build_interest_table(result.interest_table))
    for comparison in _product_tables(result):
        console.print()
        console.print(comparison.title)
        console.print(build_product_table(comparison))


def write_csv(result: ComparisonResult, stream: Optional[TextIO] = None) -> None:
    """Write each table as its own CSV block (header row included) to `stream`."""
    stream = stream or sys.stdout
    format_interest_table(result.interest_table).to_csv(stream, index=False, lineterminator="\n")
    for comparison in _product_tables(result):
        format_product_table(comparison.rows).to_csv(stream, index=False, lineterminator="\n")
