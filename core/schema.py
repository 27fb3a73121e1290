"""
Canonical input records and output table columns.

Input documents are JSON arrays with camelCase keys; the records below expose
snake_case attributes and are frozen once loaded.
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

# (year, month name): join key between snapshots and catalogs
CatalogKey = Tuple[int, str]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Product(_Record):
    name: str
    annual_rate: float = Field(alias="annualRate")  # percent, e.g. 5.0
    monthly_cost: float = Field(alias="monthlyCost")


class MonthlySnapshot(_Record):
    """One month of the account holder's real-world state."""

    year: int
    month: str
    actual_interest: float = Field(alias="actualInterest")
    current_product_name: str = Field(alias="currentProductName")

    @property
    def key(self) -> CatalogKey:
        return (self.year, self.month)


class MonthlyCatalog(_Record):
    """Products on offer in a given month."""

    year: int
    month: str
    products: List[Product] = Field(default_factory=list)

    @property
    def key(self) -> CatalogKey:
        return (self.year, self.month)


# Display headers for the month-by-month comparison table.
INTEREST_COMPARISON_COLUMNS: Tuple[str, ...] = (
    "Year",
    "Month",
    "Plan Rate",
    "Current Plan Cost",
    "Actual Interest",
    "Interest After Costs",
    "Estimated Interest",
    "Interest Diff.",
    "Capital",
    "Capital Diff.",
    "Estimated Deposit",
)

# Numeric frame columns backing INTEREST_COMPARISON_COLUMNS (same order).
INTEREST_FIELDS: Tuple[str, ...] = (
    "year",
    "month",
    "annual_rate",
    "monthly_cost",
    "actual_interest",
    "interest_after_cost",
    "estimated_interest",
    "interest_difference",
    "capital",
    "capital_difference",
    "estimated_deposit",
)

PRODUCT_COMPARISON_COLUMNS: Tuple[str, ...] = (
    "Product",
    "Annual Rate",
    "Monthly Cost",
    "Projected Interest",
    "Net Gain",
)

PRODUCT_FIELDS: Tuple[str, ...] = (
    "product",
    "annual_rate",
    "monthly_cost",
    "projected_interest",
    "net_gain",
)

# Renderer annotations carried alongside PRODUCT_FIELDS.
PRODUCT_FLAGS: Tuple[str, ...] = ("is_best", "is_negative_gain", "is_current")
