from __future__ import annotations

from datetime import datetime
from typing import Iterable

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

MONTH_LABEL_FORMAT = "%Y-%B"  # e.g. "2024-January"


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def month_start(year: int, month: str) -> pd.Timestamp:
    """
    Parse a (year, full month name) pair into the first day of that month.
    Only a four-digit year with a full English month name is accepted;
    raises ValueError otherwise.
    """
    if not 1000 <= int(year) <= 9999:
        raise ValueError(f"year must have four digits, got {year!r}")
    label = f"{int(year)}-{month}"
    try:
        parsed = datetime.strptime(label, MONTH_LABEL_FORMAT)
    except ValueError as exc:
        raise ValueError(f"cannot parse month label {label!r}") from exc
    return pd.Timestamp(parsed)


def months_between(start: pd.Timestamp, end: pd.Timestamp) -> int:
    """Whole calendar months from start to end (negative if end is earlier)."""
    delta = relativedelta(pd.Timestamp(end).to_pydatetime(), pd.Timestamp(start).to_pydatetime())
    return delta.years * 12 + delta.months


def monthly_rate(annual_rate):
    """Annual percent rate -> simple monthly fraction (rate / 100 / 12). Vectorized."""
    if np.ndim(annual_rate) == 0:
        return float(annual_rate) / 100.0 / 12.0
    return np.asarray(annual_rate, dtype=float) / 100.0 / 12.0


def format_amount(x: float) -> str:
    return f"{x:.2f}"


def format_rate(x: float) -> str:
    return f"{x:.2f}%"
