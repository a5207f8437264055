"""
Sliding Scale Tables.

Builds the tables administrators use to design and publish a year's
sliding scale: the designer table over fixed income steps, the designer
curve samples, and the per-year chart families see.
"""

from ..config import (
    DESIGNER_INCOME_STEPS,
    RETURNING_PRIOR_RATIO,
    MAX_YEAR_OVER_YEAR_CHANGE,
    MONTHS_PER_YEAR,
    PART_TIME_DISCOUNT_FACTOR,
    CURVE_POINT_COUNT,
    CURVE_MIN_INCOME_FLOOR,
    CURVE_INCOME_PADDING_BELOW,
    CURVE_INCOME_PADDING_ABOVE,
    CHART_START_INCOME,
    CHART_INCOME_INCREMENT,
)
from ..models import ScaleRow, CurvePoint, ChartRow
from .calculator import YearLike, resolve_year, tuition_for_income
from .curve import base_tuition_for_income

SCENARIOS = ("new", "returning")


def _returning_tuition(new_family_tuition: float) -> float:
    # Simulate last year's tuition, then cap the increase
    previous = new_family_tuition * RETURNING_PRIOR_RATIO
    return min(new_family_tuition, previous * (1 + MAX_YEAR_OVER_YEAR_CHANGE))


def designer_rows(year: YearLike = None, scenario: str = "new",
                  income_steps=None) -> list:
    """
    Build the sliding-scale designer table.

    Args:
        year: Candidate configuration (unsaved values are fine)
        scenario: "new" or "returning"; returning adds the capped column
        income_steps: Incomes to tabulate (defaults to DESIGNER_INCOME_STEPS)

    Returns:
        List of ScaleRow, one per income step
    """
    config = resolve_year(year)
    returning = scenario == "returning"
    rows = []

    for income in income_steps or DESIGNER_INCOME_STEPS:
        tuition = base_tuition_for_income(income, config)
        rows.append(ScaleRow(
            income=income,
            new_family_tuition=tuition,
            returning_family_tuition=_returning_tuition(tuition) if returning else None,
            monthly_tuition=tuition / MONTHS_PER_YEAR,
            part_time_tuition=tuition * PART_TIME_DISCOUNT_FACTOR,
        ))

    return rows


def income_points(low: float, high: float, count: int = CURVE_POINT_COUNT) -> list:
    """Evenly spaced incomes from `low` to `high` inclusive."""
    if count < 2:
        return [low]
    step = (high - low) / (count - 1)
    return [low + i * step for i in range(count)]


def curve_points(year: YearLike = None, scenario: str = "new",
                 count: int = CURVE_POINT_COUNT) -> list:
    """
    Sample the designer curve for plotting.

    The sampled range starts a little below the minimum income (never under
    CURVE_MIN_INCOME_FLOOR) and runs past the maximum income so the
    saturation is visible.
    """
    config = resolve_year(year)
    low = max(CURVE_MIN_INCOME_FLOOR, config.min_income - CURVE_INCOME_PADDING_BELOW)
    high = config.max_income + CURVE_INCOME_PADDING_ABOVE

    points = []
    for income in income_points(low, high, count):
        tuition = base_tuition_for_income(income, config)
        points.append(CurvePoint(
            income=income,
            tuition=tuition,
            returning_tuition=_returning_tuition(tuition) if scenario == "returning" else None,
        ))
    return points


def chart_rows(year: YearLike = None, increment: int = CHART_INCOME_INCREMENT) -> list:
    """
    Build the published sliding scale for a year.

    Incomes run from CHART_START_INCOME up to twice the year's maximum
    income. Each row prices one full-time student, one part-time student,
    and two or three full-time siblings.
    """
    config = resolve_year(year)
    upper = config.max_income * 2
    if increment <= 0:
        increment = CHART_INCOME_INCREMENT
    rows = []

    income = CHART_START_INCOME
    while income < upper + increment:
        rows.append(ChartRow(
            income=income,
            full_time=tuition_for_income(income, config, full_time=1),
            part_time=tuition_for_income(income, config, part_time=1),
            two_siblings=tuition_for_income(income, config, full_time=1, siblings=1),
            three_siblings=tuition_for_income(income, config, full_time=1, siblings=2),
        ))
        income += increment

    return rows
