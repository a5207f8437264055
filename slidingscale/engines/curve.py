"""
Sliding scale curve.

This module maps a single income onto the per-student base tuition of a
school year. It knows nothing about families or students.
"""

from ..config import INFLATION_INCREASE, STEEPNESS_EPSILON
from ..models import YearConfig


def exponent_transform(x: float, steepness: float) -> float:
    """
    Ease a position in [0, 1] along an exponential curve.

    Returns y in [0, 1] such that steepness 1 is (almost) the straight line
    from (0, 0) to (1, 1), and higher steepness bows the curve toward the
    (1, 0) corner.

    The epsilon keeps steepness 1 from dividing by zero. A steepness that
    still lands on 1, or at or below 0, has no exponential shape at all;
    those degrade to the straight line instead of failing.
    """
    adjusted = steepness + STEEPNESS_EPSILON
    if adjusted <= 0 or adjusted == 1:
        return x
    return (adjusted ** x - 1) / (adjusted - 1)


def base_tuition_for_income(income: float, year: YearConfig,
                            inflation_periods: int = 0) -> float:
    """
    Per-student tuition for one full-time student at `income`.

    CLAMPING:
    ---------
    - income <= min_income: min_tuition (inflation never applies here)
    - income >= max_income: max_tuition (the scale saturates, it does not
      extrapolate past the ceiling)
    - otherwise: interpolate along exponent_transform

    Args:
        income: Already-coerced, non-negative income
        year: Sliding-scale bounds
        inflation_periods: Flat INFLATION_INCREASE steps added above the floor

    Returns:
        Unrounded base tuition
    """
    if income <= year.min_income:
        return year.min_tuition

    if income >= year.max_income:
        base = year.max_tuition
    else:
        x = (income - year.min_income) / (year.max_income - year.min_income)
        y = exponent_transform(x, year.steepness)
        base = year.min_tuition + (year.max_tuition - year.min_tuition) * y

    if inflation_periods:
        base += inflation_periods * INFLATION_INCREASE
    return base
