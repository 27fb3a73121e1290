"""
Data quality validation for the loaded inputs before they enter the engine.

Catches problems early:
- Empty snapshot history
- Duplicate catalog months (the later one silently wins in the index)
- Snapshots out of chronological order
- Zero-rate products (capital cannot be back-calculated from them)
- Snapshots whose month or held product has no catalog entry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from core.schema import MonthlyCatalog, MonthlySnapshot
from core.utils import month_start


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one pair of inputs."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_inputs(
    snapshots: Sequence[MonthlySnapshot],
    catalogs: Sequence[MonthlyCatalog],
) -> ValidationResult:
    """
    Run all validation checks on the snapshot history and product catalogs.
    Returns a ValidationResult with errors (no output possible) and warnings
    (some rows or tables will be skipped).
    """
    result = ValidationResult()

    if len(snapshots) == 0:
        result.errors.append("Snapshot history is empty (0 months).")

    # --- Catalogs ---
    seen = set()
    for catalog in catalogs:
        if catalog.key in seen:
            result.warnings.append(
                f"Duplicate catalog for {catalog.month} {catalog.year}; the last one loaded is used."
            )
        seen.add(catalog.key)

        try:
            month_start(catalog.year, catalog.month)
        except ValueError:
            result.warnings.append(
                f"Catalog month '{catalog.year}-{catalog.month}' is not a valid Year-MonthName label."
            )

        for product in catalog.products:
            if product.annual_rate == 0:
                result.warnings.append(
                    f"Product '{product.name}' in {catalog.month} {catalog.year} has a zero annual rate."
                )

    # --- Snapshots ---
    catalog_products = {c.key: {p.name for p in c.products} for c in catalogs}
    previous = None
    for snap in snapshots:
        try:
            date = month_start(snap.year, snap.month)
        except ValueError:
            result.warnings.append(
                f"Snapshot month '{snap.year}-{snap.month}' is not a valid Year-MonthName label."
            )
            date = None

        if date is not None and previous is not None and date <= previous:
            result.warnings.append(
                f"Snapshot {snap.month} {snap.year} is not after the preceding snapshot; "
                f"input order is used as chronological order."
            )
        if date is not None:
            previous = date

        names = catalog_products.get(snap.key)
        if names is None:
            result.warnings.append(f"No catalog for snapshot month {snap.month} {snap.year}.")
        elif snap.current_product_name not in names:
            result.warnings.append(
                f"Held product '{snap.current_product_name}' missing from the "
                f"{snap.month} {snap.year} catalog."
            )

    return result
