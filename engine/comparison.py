"""
Product comparison at a fixed capital basis.

Given the capital back-calculated from the last known month, every product in
a catalog is projected at that capital:

    projected_interest = capital * annual_rate / 100 / 12
    net_gain           = projected_interest - monthly_cost

Rows are computed first, the best net gain is reduced out, and each row is
then annotated for the renderer (best / negative / currently held).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence

import numpy as np
import pandas as pd

from core.schema import PRODUCT_FIELDS, PRODUCT_FLAGS, MonthlySnapshot, Product
from core.utils import monthly_rate
from data_prep.catalog_index import CatalogIndex, find_product

from .diagnostics import Diagnostics
from .projection import back_calculate_capital


@dataclass(frozen=True)
class CapitalBasis:
    """
    Capital implied by a snapshot and the product held that month.

    `missing` names what could not be resolved ("catalog", "product" or
    "zero_rate"); `capital` is None whenever it is set.
    """
    snapshot: MonthlySnapshot
    product: Optional[Product] = None
    capital: Optional[float] = None
    missing: Optional[Literal["catalog", "product", "zero_rate"]] = None

    @property
    def resolved(self) -> bool:
        return self.missing is None


@dataclass
class ProductComparison:
    """One product comparison table (current month or a future month)."""
    year: int
    month: str
    capital: float
    current_product_name: str
    rows: pd.DataFrame  # PRODUCT_FIELDS + PRODUCT_FLAGS
    months_ahead: int = 0

    @property
    def title(self) -> str:
        return f"Product Comparison Table for {self.month} {self.year}:"

    @property
    def best(self) -> pd.DataFrame:
        return self.rows[self.rows["is_best"]]


def resolve_capital_basis(snapshot: MonthlySnapshot, index: CatalogIndex) -> CapitalBasis:
    """
    Resolve the held product of `snapshot` and the capital it implies.
    An empty or absent catalog, an unknown held product and a zero rate are
    returned as unresolved; callers decide how to report them.
    """
    products = index.get(snapshot.key)
    if not products:
        return CapitalBasis(snapshot=snapshot, missing="catalog")

    product = find_product(products, snapshot.current_product_name)
    if product is None:
        return CapitalBasis(snapshot=snapshot, missing="product")
    if product.annual_rate == 0:
        return CapitalBasis(snapshot=snapshot, product=product, missing="zero_rate")

    capital = back_calculate_capital(snapshot.actual_interest, product.annual_rate)
    return CapitalBasis(snapshot=snapshot, product=product, capital=capital)


def compare_products(
    products: Sequence[Product],
    capital: float,
    current_product_name: str,
) -> pd.DataFrame:
    """
    Project every product at `capital` and annotate the rows.

    Every row whose net gain equals the maximum is marked best, so ties all
    carry the mark. A row may be both best and current.
    """
    frame = pd.DataFrame({
        "product": pd.Series([p.name for p in products], dtype=object),
        "annual_rate": np.array([p.annual_rate for p in products], dtype=float),
        "monthly_cost": np.array([p.monthly_cost for p in products], dtype=float),
    })
    frame["projected_interest"] = capital * monthly_rate(frame["annual_rate"].to_numpy())
    frame["net_gain"] = frame["projected_interest"] - frame["monthly_cost"]

    max_net_gain = frame["net_gain"].max() if len(frame) else np.nan
    frame["is_best"] = frame["net_gain"] == max_net_gain
    frame["is_negative_gain"] = frame["net_gain"] < 0
    frame["is_current"] = frame["product"] == current_product_name

    return frame[list(PRODUCT_FIELDS + PRODUCT_FLAGS)]


def compare_current_month(
    snapshots: Sequence[MonthlySnapshot],
    index: CatalogIndex,
    diagnostics: Optional[Diagnostics] = None,
) -> Optional[ProductComparison]:
    """Compare every product on offer in the last snapshot's month against the held one."""
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    if not snapshots:
        diagnostics.report("No snapshots available; product comparison skipped")
        return None

    last = snapshots[-1]
    basis = resolve_capital_basis(last, index)
    if basis.missing == "catalog":
        diagnostics.report(f"Products not found for {last.month} {last.year}")
        return None
    if basis.missing == "product":
        diagnostics.report(f"Current product not found in the last month ({last.month} {last.year})")
        return None
    if basis.missing == "zero_rate":
        diagnostics.report(
            f"Current product '{basis.product.name}' has a zero annual rate in the last month "
            f"({last.month} {last.year}); capital cannot be derived"
        )
        return None

    return ProductComparison(
        year=last.year,
        month=last.month,
        capital=basis.capital,
        current_product_name=last.current_product_name,
        rows=compare_products(index[last.key], basis.capital, last.current_product_name),
    )
