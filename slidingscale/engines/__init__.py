"""
Tuition calculation engines.

This package contains all the engines that perform the core business
logic of the sliding-scale system. Nothing in here prints or reads files.
"""

from .curve import exponent_transform, base_tuition_for_income
from .calculator import (
    resolve_year,
    composition_factor,
    effective_income,
    tuition_for_income,
    minimum_tuition_for_income,
    calculate_tuition_options,
)
from .year_over_year import clamp_year_over_year, decisions_changed
from .contract import (
    ContractTuitionEngine,
    assistance_amount,
    step_tuition,
    all_decisions_made,
    resolve_tuition,
    student_count_for_contract,
    tuition_totals,
)
from .scale_table import SCENARIOS, designer_rows, income_points, curve_points, chart_rows

__all__ = [
    # Curve
    "exponent_transform",
    "base_tuition_for_income",
    # Calculator
    "resolve_year",
    "composition_factor",
    "effective_income",
    "tuition_for_income",
    "minimum_tuition_for_income",
    "calculate_tuition_options",
    # Year over year
    "clamp_year_over_year",
    "decisions_changed",
    # Contracts
    "ContractTuitionEngine",
    "assistance_amount",
    "step_tuition",
    "all_decisions_made",
    "resolve_tuition",
    "student_count_for_contract",
    "tuition_totals",
    # Tables
    "SCENARIOS",
    "designer_rows",
    "income_points",
    "curve_points",
    "chart_rows",
]
