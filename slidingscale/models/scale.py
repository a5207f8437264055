"""
Sliding scale table data models.

Rows produced by the sliding-scale designer and the per-year chart.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScaleRow:
    """One income step in the sliding-scale designer table."""
    income: float
    new_family_tuition: float
    returning_family_tuition: Optional[float]   # Only for the "returning" scenario
    monthly_tuition: float
    part_time_tuition: float


@dataclass(frozen=True)
class CurvePoint:
    """A single (income, tuition) sample of the designer curve."""
    income: float
    tuition: float
    returning_tuition: Optional[float] = None


@dataclass(frozen=True)
class ChartRow:
    """
    One row of the published sliding scale for a school year.

    All amounts are family totals for the listed composition.
    """
    income: float
    full_time: float
    part_time: float
    two_siblings: float     # Two full-time students
    three_siblings: float   # Three full-time students
