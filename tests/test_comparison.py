"""Unit tests for the last-month product comparison"""

import pytest

from conftest import catalog, snapshot
from data_prep.catalog_index import build_catalog_index
from engine.comparison import compare_current_month, compare_products, resolve_capital_basis
from engine.diagnostics import Diagnostics


def test_compare_products_projection_and_net_gain(catalogs):
    rows = compare_products(catalogs[0].products, 25200.0, "Plus")

    assert list(rows["product"]) == ["Basic", "Plus", "Premium", "Gold"]
    assert list(rows["projected_interest"]) == pytest.approx([63.0, 105.0, 126.0, 21.0])
    assert list(rows["net_gain"]) == pytest.approx([63.0, 95.0, 101.0, -29.0])


def test_annotations(catalogs):
    rows = compare_products(catalogs[0].products, 25200.0, "Plus")

    assert list(rows["is_best"]) == [False, False, True, False]
    assert list(rows["is_negative_gain"]) == [False, False, False, True]
    assert list(rows["is_current"]) == [False, True, False, False]


def test_best_rows_carry_the_maximum(catalogs):
    rows = compare_products(catalogs[0].products, 1000.0, "Gold")
    best = rows[rows["is_best"]]

    assert len(best) >= 1
    assert (best["net_gain"] == rows["net_gain"].max()).all()
    assert not (rows["net_gain"] > best["net_gain"].iloc[0]).any()


def test_ties_are_all_marked_best():
    products = catalog(2024, "May", ("A", 4.0, 0.0), ("B", 4.0, 0.0), ("C", 1.0, 0.0)).products
    rows = compare_products(products, 12000.0, "C")
    assert list(rows["is_best"]) == [True, True, False]


def test_current_can_also_be_best():
    products = catalog(2024, "May", ("A", 4.0, 0.0), ("B", 2.0, 0.0)).products
    row = compare_products(products, 12000.0, "A").iloc[0]
    assert row["is_best"] and row["is_current"]


def test_empty_product_list():
    rows = compare_products([], 1000.0, "A")
    assert rows.empty
    assert "is_best" in rows.columns


def test_compare_current_month_uses_last_snapshot(snapshots, catalogs):
    comparison = compare_current_month(snapshots, build_catalog_index(catalogs))

    assert (comparison.year, comparison.month) == (2024, "February")
    assert comparison.capital == pytest.approx(25200.0)
    assert comparison.current_product_name == "Plus"
    assert comparison.title == "Product Comparison Table for February 2024:"
    assert list(comparison.best["product"]) == ["Premium"]


def test_missing_catalog_for_last_month(catalogs):
    diagnostics = Diagnostics()
    result = compare_current_month(
        [snapshot(2025, "July", 10.0, "Plus")], build_catalog_index(catalogs), diagnostics
    )
    assert result is None
    assert diagnostics.messages == ["Products not found for July 2025"]


def test_missing_current_product_in_last_month(catalogs):
    diagnostics = Diagnostics()
    result = compare_current_month(
        [snapshot(2024, "April", 10.0, "Plus")], build_catalog_index(catalogs), diagnostics
    )
    assert result is None
    assert diagnostics.messages == ["Current product not found in the last month (April 2024)"]


def test_no_snapshots():
    diagnostics = Diagnostics()
    assert compare_current_month([], {}, diagnostics) is None
    assert len(diagnostics) == 1


def test_zero_rate_held_product_in_last_month():
    index = build_catalog_index([catalog(2024, "January", ("Free", 0.0, 0.0), ("Plus", 5.0, 10.0))])
    diagnostics = Diagnostics()
    result = compare_current_month([snapshot(2024, "January", 10.0, "Free")], index, diagnostics)

    assert result is None
    assert len(diagnostics) == 1
    assert "'Free' has a zero annual rate in the last month (January 2024)" in diagnostics.messages[0]


def test_resolve_capital_basis_reasons(catalogs):
    index = build_catalog_index(catalogs + [catalog(2024, "June", ("Free", 0.0, 0.0))])

    assert resolve_capital_basis(snapshot(2025, "July", 1.0, "Plus"), index).missing == "catalog"
    assert resolve_capital_basis(snapshot(2024, "April", 1.0, "Plus"), index).missing == "product"
    zero = resolve_capital_basis(snapshot(2024, "June", 1.0, "Free"), index)
    assert zero.missing == "zero_rate"
    assert zero.product.name == "Free"
    assert zero.capital is None

    resolved = resolve_capital_basis(snapshot(2024, "January", 100.0, "Plus"), index)
    assert resolved.resolved
    assert resolved.product.annual_rate == 5.0
    assert resolved.capital == pytest.approx(24000.0)
