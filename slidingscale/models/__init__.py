"""
Data models for the sliding-scale tuition system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .year import YearConfig
from .enrollment import AttendanceDecision, EnrollmentComposition
from .contract import FamilyRecord, ContractRecord, TuitionQuote
from .scale import ScaleRow, CurvePoint, ChartRow

__all__ = [
    # Year configuration
    "YearConfig",
    # Enrollment
    "AttendanceDecision",
    "EnrollmentComposition",
    # Family and contract records
    "FamilyRecord",
    "ContractRecord",
    "TuitionQuote",
    # Scale tables
    "ScaleRow",
    "CurvePoint",
    "ChartRow",
]
