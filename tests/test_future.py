"""Unit tests for future scenario projection"""

import pytest

from conftest import catalog, snapshot
from core.utils import month_start
from data_prep.catalog_index import build_catalog_index
from engine.diagnostics import Diagnostics
from engine.future import project_future


def test_future_months_sorted_ascending(snapshots, catalogs):
    tables = project_future(snapshots, build_catalog_index(catalogs))

    assert [(t.year, t.month) for t in tables] == [(2024, "March"), (2024, "April")]
    dates = [month_start(t.year, t.month) for t in tables]
    assert all(a < b for a, b in zip(dates, dates[1:]))
    assert [t.months_ahead for t in tables] == [1, 2]


def test_capital_basis_is_fixed(snapshots, catalogs):
    tables = project_future(snapshots, build_catalog_index(catalogs))

    assert {t.capital for t in tables} == {tables[0].capital}
    assert tables[0].capital == pytest.approx(25200.0)
    march = tables[0].rows
    assert list(march["projected_interest"]) == pytest.approx([25200.0 * 3.25 / 1200, 25200.0 * 5.25 / 1200])


def test_held_product_absent_from_future_catalog_is_not_an_error(snapshots, catalogs):
    diagnostics = Diagnostics()
    april = project_future(snapshots, build_catalog_index(catalogs), diagnostics)[1]

    assert not april.rows["is_current"].any()
    assert april.current_product_name == "Plus"
    assert diagnostics.messages == []


def test_past_and_same_month_catalogs_excluded(snapshots, catalogs):
    tables = project_future(snapshots, build_catalog_index(catalogs))
    months = {(t.year, t.month) for t in tables}
    assert (2024, "February") not in months
    assert (2023, "December") not in months


def test_no_future_catalogs(snapshots, catalogs):
    diagnostics = Diagnostics()
    tables = project_future(snapshots, build_catalog_index(catalogs[:2]), diagnostics)
    assert tables == []
    assert diagnostics.messages == ["No future products found."]


def test_unparseable_catalog_month_skipped(snapshots, catalogs):
    diagnostics = Diagnostics()
    extra = catalogs + [catalog(2024, "Smarch", ("Plus", 9.0, 0.0))]
    tables = project_future(snapshots, build_catalog_index(extra), diagnostics)

    assert [t.month for t in tables] == ["March", "April"]
    assert len(diagnostics) == 1
    assert "2024-Smarch" in diagnostics.messages[0]


def test_unresolvable_last_month_gives_no_tables(catalogs):
    diagnostics = Diagnostics()
    snaps = [snapshot(2024, "February", 105.0, "Platinum")]
    assert project_future(snaps, build_catalog_index(catalogs), diagnostics) == []
    assert diagnostics.messages == ["Current rate not found for last month (February 2024)"]


def test_unparseable_last_month(catalogs):
    diagnostics = Diagnostics()
    snaps = [snapshot(2024, "Febtober", 105.0, "Plus")]
    assert project_future(snaps, build_catalog_index(catalogs), diagnostics) == []
    assert "2024-Febtober" in diagnostics.messages[0]


def test_year_boundary():
    index = build_catalog_index([
        catalog(2024, "December", ("Plus", 6.0, 0.0)),
        catalog(2025, "January", ("Plus", 6.0, 0.0)),
        catalog(2024, "November", ("Plus", 6.0, 0.0)),
    ])
    tables = project_future([snapshot(2024, "December", 50.0, "Plus")], index)
    assert [(t.year, t.month, t.months_ahead) for t in tables] == [(2025, "January", 1)]


def test_missing_last_month_catalog_reports_rate_not_found(catalogs):
    diagnostics = Diagnostics()
    snaps = [snapshot(2024, "July", 10.0, "Plus")]
    assert project_future(snaps, build_catalog_index(catalogs), diagnostics) == []
    assert diagnostics.messages == ["Current rate not found for last month (July 2024)"]


def test_zero_rate_held_product_gives_no_tables():
    index = build_catalog_index([
        catalog(2024, "January", ("Free", 0.0, 0.0), ("Plus", 5.0, 10.0)),
        catalog(2024, "February", ("Plus", 5.0, 10.0)),
    ])
    diagnostics = Diagnostics()
    tables = project_future([snapshot(2024, "January", 10.0, "Free")], index, diagnostics)

    assert tables == []
    assert diagnostics.messages == ["Current rate not found for last month (January 2024)"]
