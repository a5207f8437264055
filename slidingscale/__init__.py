"""
Sliding Scale Tuition Package
=============================

Income-based tuition for a small independent school.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                        CALCULATION LAYER                                 │
│        (Pure logic - returns numbers and dataclasses, NO printing)      │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │  RecordParser   │  │   ContractTuitionEngine     │  │
│  │  (I/O)      │  │  (documents)    │  │ (minimum/suggested tuition) │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │   tuition_for_income    │  │  designer_rows / chart_rows         │  │
│  │ (curve + composition)   │  │  (sliding scale tables)             │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                         TerminalDisplay                                  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        TuitionAdvisor                                    │
│          (Orchestrator - connects calculation to presentation)          │
└─────────────────────────────────────────────────────────────────────────┘

USAGE
-----

    from slidingscale import YearConfig, tuition_for_income, format_currency

    year = YearConfig(min_income=28000, max_income=120000,
                      min_tuition=1000, max_tuition=12500, steepness=1.56)
    tuition = tuition_for_income(74000, year, full_time=1, siblings=1)
    print(format_currency(tuition))

    # From a contract's attendance decisions
    composition = calculate_tuition_options({"ana": "Full Time", "ben": "Part Time"})
    tuition_for_income(74000, year, **composition.as_options())

Running from command line:

    python -m slidingscale

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import TuitionAdvisor
from .cli import main

# Model exports
from .models import (
    YearConfig,
    AttendanceDecision,
    EnrollmentComposition,
    FamilyRecord,
    ContractRecord,
    TuitionQuote,
    ScaleRow,
    CurvePoint,
    ChartRow,
)

# Engine exports
from .engines import (
    exponent_transform,
    base_tuition_for_income,
    composition_factor,
    tuition_for_income,
    minimum_tuition_for_income,
    calculate_tuition_options,
    clamp_year_over_year,
    decisions_changed,
    ContractTuitionEngine,
    assistance_amount,
    step_tuition,
    designer_rows,
    curve_points,
    chart_rows,
)

# Formatting exports
from .formatting import format_currency, round_currency, parse_currency

# Data exports
from .data import DataLoader, RecordParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    DEFAULT_MINIMUM_INCOME,
    DEFAULT_MAXIMUM_INCOME,
    DEFAULT_MINIMUM_TUITION,
    DEFAULT_MAXIMUM_TUITION,
    DEFAULT_STEEPNESS,
    SIBLING_DISCOUNT_FACTOR,
    PART_TIME_DISCOUNT_FACTOR,
    MAX_YEAR_OVER_YEAR_CHANGE,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "TuitionAdvisor",
    "main",
    # Models
    "YearConfig",
    "AttendanceDecision",
    "EnrollmentComposition",
    "FamilyRecord",
    "ContractRecord",
    "TuitionQuote",
    "ScaleRow",
    "CurvePoint",
    "ChartRow",
    # Engines
    "exponent_transform",
    "base_tuition_for_income",
    "composition_factor",
    "tuition_for_income",
    "minimum_tuition_for_income",
    "calculate_tuition_options",
    "clamp_year_over_year",
    "decisions_changed",
    "ContractTuitionEngine",
    "assistance_amount",
    "step_tuition",
    "designer_rows",
    "curve_points",
    "chart_rows",
    # Formatting
    "format_currency",
    "round_currency",
    "parse_currency",
    # Data
    "DataLoader",
    "RecordParser",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "DEFAULT_MINIMUM_INCOME",
    "DEFAULT_MAXIMUM_INCOME",
    "DEFAULT_MINIMUM_TUITION",
    "DEFAULT_MAXIMUM_TUITION",
    "DEFAULT_STEEPNESS",
    "SIBLING_DISCOUNT_FACTOR",
    "PART_TIME_DISCOUNT_FACTOR",
    "MAX_YEAR_OVER_YEAR_CHANGE",
]
