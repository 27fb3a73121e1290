"""
Projection engine — month-by-month capital carry-forward, product comparison,
and future scenario tables.
"""

from .runner import ComparisonResult, run_comparison, run_pipeline
from .projection import project_interest
from .comparison import ProductComparison, compare_products, compare_current_month
from .future import project_future

__all__ = [
    "ComparisonResult",
    "run_comparison",
    "run_pipeline",
    "project_interest",
    "ProductComparison",
    "compare_products",
    "compare_current_month",
    "project_future",
]
