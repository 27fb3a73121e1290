"""Shared fixtures: small snapshot histories and catalogs."""

import json
import sys
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.schema import MonthlyCatalog, MonthlySnapshot, Product


def snapshot(year, month, interest, product):
    return MonthlySnapshot(
        year=year, month=month, actualInterest=interest, currentProductName=product
    )


def catalog(year, month, *products):
    return MonthlyCatalog(
        year=year,
        month=month,
        products=[Product(name=n, annualRate=r, monthlyCost=c) for n, r, c in products],
    )


STANDARD_PRODUCTS = (
    ("Basic", 3.0, 0.0),
    ("Plus", 5.0, 10.0),
    ("Premium", 6.0, 25.0),
    ("Gold", 1.0, 50.0),
)


@pytest.fixture
def snapshots():
    return [
        snapshot(2024, "January", 100.0, "Plus"),
        snapshot(2024, "February", 105.0, "Plus"),
    ]


@pytest.fixture
def catalogs():
    return [
        catalog(2024, "January", *STANDARD_PRODUCTS),
        catalog(2024, "February", *STANDARD_PRODUCTS),
        # deliberately out of order
        catalog(2024, "April", ("Basic", 3.5, 0.0), ("Premium", 6.5, 25.0)),
        catalog(2024, "March", ("Basic", 3.25, 0.0), ("Plus", 5.25, 10.0)),
        catalog(2023, "December", ("Plus", 4.5, 10.0)),
    ]


@pytest.fixture
def write_json(tmp_path):
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def data_files(write_json):
    """Snapshot and catalog documents on disk, in the camelCase input format."""
    snapshots_path = write_json("interest_data.json", [
        {"year": 2024, "month": "January", "actualInterest": 100.0, "currentProductName": "Plus"},
        {"year": 2024, "month": "February", "actualInterest": 105.0, "currentProductName": "Plus"},
    ])
    products = [
        {"name": n, "annualRate": r, "monthlyCost": c} for n, r, c in STANDARD_PRODUCTS
    ]
    catalogs_path = write_json("products_data.json", [
        {"year": 2024, "month": "January", "products": products},
        {"year": 2024, "month": "February", "products": products},
        {"year": 2024, "month": "March", "products": products[:2]},
    ])
    return snapshots_path, catalogs_path
