"""
Tuition Calculator.

This module turns a family's income and enrollment into a tuition figure.
Every function here is pure: same inputs, same output, no I/O.
"""

from typing import Optional, Union

from ..config import (
    FULL_TIME_FACTOR,
    SIBLING_DISCOUNT_FACTOR,
    PART_TIME_DISCOUNT_FACTOR,
)
from ..formatting import coerce_amount, coerce_count
from ..models import YearConfig, AttendanceDecision, EnrollmentComposition
from .curve import base_tuition_for_income


YearLike = Union[YearConfig, dict, None]


def resolve_year(year: YearLike) -> YearConfig:
    """Accept a YearConfig, a camelCase year document, or None (defaults)."""
    if isinstance(year, YearConfig):
        return year
    if year is None:
        return YearConfig()
    return YearConfig.from_document(year)


def composition_factor(full_time=0, part_time=0, siblings=0) -> float:
    """
    Multiplier applied to the base tuition for a family's students.

    Example:
        1 full time + 1 sibling + 1 part time -> 1.0 + 0.5 + 0.625 = 2.125
    """
    return (
        coerce_count(full_time) * FULL_TIME_FACTOR
        + coerce_count(siblings) * SIBLING_DISCOUNT_FACTOR
        + coerce_count(part_time) * PART_TIME_DISCOUNT_FACTOR
    )


def effective_income(income, year: YearConfig, opt_out: bool = False) -> float:
    """
    The income the scale is evaluated at.

    A family that opted out of the sliding scale, or never entered an
    income, is charged as if it earned the maximum income. Garbage and
    negative incomes count as 0.
    """
    if opt_out or income is None:
        return year.max_income
    value = coerce_amount(income, 0.0)
    return value if value > 0 else 0.0


def tuition_for_income(income: Optional[float], year: YearLike = None, *,
                       full_time=0, part_time=0, siblings=0,
                       inflation_periods=0, opt_out: bool = False) -> float:
    """
    Calculate the total tuition owed for the provided income.

    Args:
        income: Gross family income, or None if not entered
        year: The school year's sliding-scale configuration
        full_time: Primary full-time students (0 or 1 in practice)
        part_time: Part-time students
        siblings: Full-time students beyond the first
        inflation_periods: Number of flat inflation increases to apply
        opt_out: Family declined the sliding scale

    Returns:
        Unrounded family tuition; use round_currency for display or storage.
        Never raises.
    """
    config = resolve_year(year)
    base = base_tuition_for_income(
        effective_income(income, config, opt_out),
        config,
        coerce_count(inflation_periods),
    )
    return base * composition_factor(full_time, part_time, siblings)


def minimum_tuition_for_income(income: Optional[float], year: YearLike = None,
                               **options) -> float:
    """
    Lowest acceptable tuition for a family.

    When income is above the year's maximum income the calculation uses the
    maximum income instead, so the minimum saturates at the configured
    ceiling no matter how high the declared income goes.
    """
    config = resolve_year(year)
    if income is not None and coerce_amount(income) > config.max_income:
        income = config.max_income
    return tuition_for_income(income, config, **options)


def calculate_tuition_options(student_decisions: Optional[dict]) -> EnrollmentComposition:
    """
    Derive the enrollment composition from per-student decisions.

    The first full-time student is primary; every further full-time student
    is a sibling. Part-time students are counted on their own and
    not-attending or undecided students are ignored.

    Args:
        student_decisions: Mapping of student id -> AttendanceDecision or the
            stored decision string

    Returns:
        EnrollmentComposition (all zeros for an empty mapping)
    """
    full_time = part_time = siblings = 0

    for decision in (student_decisions or {}).values():
        decision = AttendanceDecision.parse(decision)
        if decision is AttendanceDecision.FULL_TIME:
            if full_time == 0:
                full_time = 1
            else:
                siblings += 1
        elif decision is AttendanceDecision.PART_TIME:
            part_time += 1

    return EnrollmentComposition(full_time=full_time, part_time=part_time, siblings=siblings)
