"""Tests for the sliding-scale designer and year chart tables."""

import pytest

from slidingscale.config import DESIGNER_INCOME_STEPS
from slidingscale.engines import designer_rows, curve_points, chart_rows, income_points


def test_designer_rows_new_families(example_year):
    rows = designer_rows(example_year)

    assert [row.income for row in rows] == DESIGNER_INCOME_STEPS
    assert rows[0].new_family_tuition == 1000
    assert rows[-1].new_family_tuition == 12500
    for row in rows:
        assert row.returning_family_tuition is None
        assert row.monthly_tuition == pytest.approx(row.new_family_tuition / 12)
        assert row.part_time_tuition == pytest.approx(row.new_family_tuition * 0.625)


def test_designer_rows_returning_families_are_capped(example_year):
    rows = designer_rows(example_year, scenario="returning")
    for row in rows:
        assert row.returning_family_tuition == pytest.approx(row.new_family_tuition * 0.99)
        assert row.returning_family_tuition <= row.new_family_tuition


def test_designer_rows_custom_steps(example_year):
    rows = designer_rows(example_year, income_steps=[50000, 60000])
    assert len(rows) == 2
    assert rows[0].new_family_tuition < rows[1].new_family_tuition


def test_income_points():
    assert income_points(0, 100, 5) == [0, 25, 50, 75, 100]
    assert income_points(10, 20, 1) == [10]


def test_curve_points_span(example_year):
    points = curve_points(example_year)

    assert len(points) == 100
    assert points[0].income == 18000
    assert points[-1].income == pytest.approx(170000)
    assert points[0].tuition == 1000
    assert points[-1].tuition == 12500
    assert all(p.returning_tuition is None for p in points)


def test_curve_points_floor_low_minimum_income():
    points = curve_points({"minimumIncome": 5000, "maximumIncome": 60000}, count=10)
    assert points[0].income == 10000


def test_chart_rows(example_year):
    rows = chart_rows(example_year)

    assert rows[0].income == 10000
    assert rows[-1].income == 240000
    assert len(rows) == 47

    first = rows[0]
    assert first.full_time == 1000
    assert first.part_time == 625
    assert first.two_siblings == 1500
    assert first.three_siblings == 2000

    last = rows[-1]
    assert last.full_time == 12500
    assert last.three_siblings == 25000


def test_chart_rows_ignore_bad_increment(example_year):
    assert len(chart_rows(example_year, increment=0)) == len(chart_rows(example_year))
