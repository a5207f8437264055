"""
Family and contract data models.

These are the slices of the portal's family and contract documents that
tuition depends on, plus the TuitionQuote produced for a contract.
"""

from dataclasses import dataclass, field
from typing import Optional

from .enrollment import EnrollmentComposition


@dataclass
class FamilyRecord:
    """
    A family as far as tuition is concerned.

    Attributes:
        id: Family document id
        name: Family display name
        gross_income: Declared gross family income, None if not entered
        sliding_scale_opt_out: True when the family declined to share income
        student_ids: Ids of the family's students, in document order
    """
    id: str
    name: str
    gross_income: Optional[float] = None
    sliding_scale_opt_out: bool = False
    student_ids: list = field(default_factory=list)


@dataclass
class ContractRecord:
    """
    An enrollment contract between a family and the school for one year.

    `student_decisions` maps student id -> AttendanceDecision (or None when
    the decision has not been made yet).
    """
    id: str
    year_id: str
    family_id: str
    student_decisions: dict = field(default_factory=dict)
    tuition: Optional[float] = None
    is_signed: bool = False


@dataclass
class TuitionQuote:
    """
    Every tuition figure shown while editing a contract.

    Example for a family earning $74,000 with one full-time student
    (default year):
        sliding_scale_tuition: 6104
        minimum_tuition: 6104
        suggested_tuition: 6104
        slider_max: 12208
        full_time_rate: 6104
        sibling_rate: 3052
        part_time_rate: 3815
        year_over_year_applied: False
    """
    composition: EnrollmentComposition
    sliding_scale_tuition: int       # Rounded sliding scale figure for the composition
    minimum_tuition: float           # Lowest tuition accepted without assistance
    suggested_tuition: float         # max(sliding scale, minimum)
    slider_max: float                # Upper bound for the tuition slider
    full_time_rate: float            # One full-time student
    sibling_rate: float              # Each additional full-time student
    part_time_rate: float            # One part-time student
    year_over_year_applied: bool = False
    prior_tuition: Optional[float] = None
