"""
Future scenario projection.

Catalogs dated after the last snapshot are compared at the capital implied by
that last snapshot. The capital is a fixed basis: it is not rolled forward
month to month, so every future table answers "what would my current balance
earn under next month's offers".
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from core.schema import MonthlySnapshot
from core.utils import month_start, months_between
from data_prep.catalog_index import CatalogIndex

from .comparison import ProductComparison, compare_products, resolve_capital_basis
from .diagnostics import Diagnostics

logger = logging.getLogger(__name__)


def project_future(
    snapshots: Sequence[MonthlySnapshot],
    index: CatalogIndex,
    diagnostics: Optional[Diagnostics] = None,
) -> List[ProductComparison]:
    """
    Build one product comparison per catalog month strictly after the last
    snapshot, in ascending date order.

    The held product is matched by the last snapshot's product *name*; a future
    catalog that no longer offers it simply has no row marked current.
    Catalogs whose month label cannot be parsed are reported and skipped.
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    if not snapshots:
        diagnostics.report("No snapshots available; future comparison skipped")
        return []

    last = snapshots[-1]
    try:
        last_date = month_start(last.year, last.month)
    except ValueError as exc:
        diagnostics.report(f"Error parsing date '{last.year}-{last.month}': {exc}")
        return []

    basis = resolve_capital_basis(last, index)
    if not basis.resolved:
        diagnostics.report(f"Current rate not found for last month ({last.month} {last.year})")
        return []

    future = []
    for (year, month), products in index.items():
        try:
            date = month_start(year, month)
        except ValueError as exc:
            diagnostics.report(f"Error parsing date '{year}-{month}': {exc}")
            continue
        if date > last_date:
            future.append((date, year, products))

    if not future:
        diagnostics.report("No future products found.")
        return []

    # stable: equal dates keep catalog order
    future.sort(key=lambda item: item[0])

    comparisons = []
    for date, year, products in future:
        comparisons.append(ProductComparison(
            year=year,
            month=date.strftime("%B"),
            capital=basis.capital,
            current_product_name=last.current_product_name,
            rows=compare_products(products, basis.capital, last.current_product_name),
            months_ahead=months_between(last_date, date),
        ))

    logger.info("Projected %d future month(s) at capital %.2f", len(comparisons), basis.capital)
    return comparisons
