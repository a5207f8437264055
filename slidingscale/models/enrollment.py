"""
Enrollment data models.

Contains the AttendanceDecision enum recorded per student on a contract and
the EnrollmentComposition derived from those decisions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AttendanceDecision(Enum):
    """
    What a family decided for one student for one school year.

    The values are the strings stored on contract documents.
    """
    NOT_ATTENDING = "Not Attending"
    PART_TIME = "Part Time"
    FULL_TIME = "Full Time"

    @classmethod
    def parse(cls, value) -> Optional["AttendanceDecision"]:
        """Parse a stored decision; unknown or blank values mean "undecided"."""
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip())
        except ValueError:
            return None

    @property
    def is_attending(self) -> bool:
        return self is not AttendanceDecision.NOT_ATTENDING


@dataclass(frozen=True)
class EnrollmentComposition:
    """
    How many students a family is paying for, by role.

    Only the first full-time student is counted in `full_time`, so it is
    always 0 or 1. Every further full-time student is a sibling.
    """
    full_time: int = 0
    part_time: int = 0
    siblings: int = 0

    @property
    def is_attending(self) -> bool:
        return self.student_count > 0

    @property
    def student_count(self) -> int:
        return self.full_time + self.part_time + self.siblings

    def as_options(self) -> dict:
        """Keyword arguments for tuition_for_income."""
        return {
            "full_time": self.full_time,
            "part_time": self.part_time,
            "siblings": self.siblings,
        }
