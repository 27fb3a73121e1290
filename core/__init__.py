"""
Core package — schema definitions, configuration, errors, and shared utilities.
No business logic lives here.
"""

from .schema import (
    CatalogKey,
    Product,
    MonthlySnapshot,
    MonthlyCatalog,
    INTEREST_COMPARISON_COLUMNS,
    PRODUCT_COMPARISON_COLUMNS,
)
from .config import ComparisonConfig
from .errors import DataLoadError
from .utils import require_columns, month_start, months_between, monthly_rate

__all__ = [
    "CatalogKey",
    "Product",
    "MonthlySnapshot",
    "MonthlyCatalog",
    "INTEREST_COMPARISON_COLUMNS",
    "PRODUCT_COMPARISON_COLUMNS",
    "ComparisonConfig",
    "DataLoadError",
    "require_columns",
    "month_start",
    "months_between",
    "monthly_rate",
]
