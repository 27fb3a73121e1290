"""
Month-by-month interest comparison.

For each snapshot the capital is back-calculated from the interest actually
earned and the held product's rate:

    capital = actual_interest / (annual_rate / 100 / 12)

The previous month's capital is then carried forward as the basis for the
interest we *would* have earned with no deposit or withdrawal, which isolates
deposit activity from pure interest accrual:

    estimated_interest  = previous_capital * monthly_rate
    interest_difference = actual_interest - estimated_interest
    capital_difference  = capital - previous_capital
    estimated_deposit   = capital_difference - actual_interest
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import pandas as pd

from core.schema import INTEREST_FIELDS, MonthlySnapshot
from core.utils import monthly_rate
from data_prep.catalog_index import CatalogIndex, find_product

from .diagnostics import Diagnostics

logger = logging.getLogger(__name__)


def back_calculate_capital(actual_interest: float, annual_rate: float) -> float:
    """Principal implied by one month of interest at annual_rate (percent)."""
    if annual_rate == 0:
        raise ZeroDivisionError("capital is undefined for a zero annual rate")
    return actual_interest / monthly_rate(annual_rate)


def project_interest(
    snapshots: Sequence[MonthlySnapshot],
    index: CatalogIndex,
    diagnostics: Optional[Diagnostics] = None,
) -> pd.DataFrame:
    """
    Build the month-by-month comparison table.

    Parameters
    ----------
    snapshots : sequence of MonthlySnapshot
        Account history; input order is taken as chronological order.
    index : CatalogIndex
        (year, month) -> products, from build_catalog_index()
    diagnostics : Diagnostics, optional
        Collector for skipped rows; a fresh one is used if omitted.

    Returns
    -------
    DataFrame with columns core.schema.INTEREST_FIELDS, one row per snapshot
    that could be resolved. Skipped snapshots produce no row and do not
    advance the carry-forward basis.
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    rows: List[dict] = []
    # The first position has no basis. A later row whose predecessors were all
    # skipped projects against a zero basis.
    previous_capital = 0.0

    for idx, snap in enumerate(snapshots):
        products = index.get(snap.key)
        if products is None:
            diagnostics.report(f"Products not found for {snap.month} {snap.year}")
            continue

        product = find_product(products, snap.current_product_name)
        if product is None:
            diagnostics.report(f"Current product not found for {snap.month} {snap.year}")
            continue
        if product.annual_rate == 0:
            diagnostics.report(
                f"Current product '{product.name}' has a zero annual rate for "
                f"{snap.month} {snap.year}; capital cannot be derived"
            )
            continue

        rate_m = monthly_rate(product.annual_rate)
        interest_after_cost = snap.actual_interest - product.monthly_cost
        capital = back_calculate_capital(snap.actual_interest, product.annual_rate)

        if idx > 0:
            estimated_interest = previous_capital * rate_m
            interest_difference = snap.actual_interest - estimated_interest
            capital_difference = capital - previous_capital
            estimated_deposit = capital_difference - snap.actual_interest
        else:
            estimated_interest = 0.0
            interest_difference = 0.0
            capital_difference = 0.0
            estimated_deposit = 0.0

        previous_capital = capital

        rows.append({
            "year": snap.year,
            "month": snap.month,
            "annual_rate": product.annual_rate,
            "monthly_cost": product.monthly_cost,
            "actual_interest": snap.actual_interest,
            "interest_after_cost": interest_after_cost,
            "estimated_interest": estimated_interest,
            "interest_difference": interest_difference,
            "capital": capital,
            "capital_difference": capital_difference,
            "estimated_deposit": estimated_deposit,
        })

    logger.debug("Interest comparison: %d of %d months resolved", len(rows), len(snapshots))
    return pd.DataFrame(rows, columns=list(INTEREST_FIELDS))
