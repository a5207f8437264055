"""
Contract Tuition Engine.

This module produces the figures an administrator sees while editing a
family's enrollment contract: the sliding scale tuition, the minimum the
school accepts without assistance, and the suggested tuition.
"""

import logging
import math
from typing import Iterable, Optional

from ..config import TUITION_STEP
from ..formatting import coerce_amount, round_currency
from ..models import (
    YearConfig,
    AttendanceDecision,
    FamilyRecord,
    ContractRecord,
    TuitionQuote,
)
from .calculator import (
    YearLike,
    resolve_year,
    tuition_for_income,
    minimum_tuition_for_income,
    calculate_tuition_options,
)
from .year_over_year import clamp_year_over_year, decisions_changed

logger = logging.getLogger(__name__)


class ContractTuitionEngine:
    """
    Quotes tuition for contracts in a single school year.

    HOW THE NUMBERS RELATE:
    -----------------------
    1. sliding scale: the curve evaluated at the family's income for the
       composition derived from the attendance decisions
    2. minimum: the sliding scale figure, saturated at the maximum income,
       then held within the year-over-year band of last year's contract
       when attendance is unchanged
    3. suggested: whichever of the two is larger

    USAGE:
        engine = ContractTuitionEngine(year)
        quote = engine.quote(family, contract.student_decisions, prior_contract)
    """

    def __init__(self, year: YearLike = None, inflation_periods: int = 0):
        self.year: YearConfig = resolve_year(year)
        self.inflation_periods = inflation_periods

    def _tuition(self, family: FamilyRecord, **composition) -> float:
        return tuition_for_income(
            family.gross_income,
            self.year,
            inflation_periods=self.inflation_periods,
            opt_out=family.sliding_scale_opt_out,
            **composition,
        )

    def quote(self, family: FamilyRecord, student_decisions: Optional[dict],
              prior_contract: Optional[ContractRecord] = None) -> TuitionQuote:
        """
        Build the full tuition quote for one family.

        Args:
            family: The family being enrolled
            student_decisions: Student id -> attendance decision for this year
            prior_contract: Last year's contract for the same family, if any

        Returns:
            TuitionQuote with every figure the contract editor shows
        """
        composition = calculate_tuition_options(student_decisions)
        options = composition.as_options()

        sliding_scale = round_currency(self._tuition(family, **options))

        minimum = sliding_scale
        income = coerce_amount(family.gross_income, 0.0)
        if not family.sliding_scale_opt_out and income > self.year.max_income:
            minimum = round_currency(minimum_tuition_for_income(
                family.gross_income, self.year,
                inflation_periods=self.inflation_periods, **options,
            ))

        prior_tuition = prior_contract.tuition if prior_contract else None
        unchanged = prior_contract is not None and not decisions_changed(
            student_decisions, prior_contract.student_decisions, family.student_ids or None,
        )
        clamped = clamp_year_over_year(minimum, prior_tuition, decisions_unchanged=unchanged)
        year_over_year_applied = clamped != minimum
        minimum = clamped

        suggested = max(sliding_scale, minimum)

        full_time_rate = round_currency(self._tuition(family, full_time=1))
        sibling_total = round_currency(self._tuition(family, full_time=1, siblings=1))
        part_time_rate = round_currency(self._tuition(family, part_time=1))

        logger.debug(
            "Quote for family %s: sliding=%s minimum=%s suggested=%s",
            family.id, sliding_scale, minimum, suggested,
        )

        return TuitionQuote(
            composition=composition,
            sliding_scale_tuition=sliding_scale,
            minimum_tuition=minimum,
            suggested_tuition=suggested,
            slider_max=max(sliding_scale, suggested) * 2,
            full_time_rate=full_time_rate,
            sibling_rate=sibling_total - full_time_rate,
            part_time_rate=part_time_rate,
            year_over_year_applied=year_over_year_applied,
            prior_tuition=prior_tuition if unchanged else None,
        )


def assistance_amount(tuition: float, minimum_tuition: float) -> float:
    """Tuition assistance needed when the agreed tuition is below the minimum."""
    tuition = coerce_amount(tuition)
    minimum_tuition = coerce_amount(minimum_tuition)
    if tuition < minimum_tuition:
        return minimum_tuition - tuition
    return 0


def step_tuition(tuition: float, direction: int, step: int = TUITION_STEP) -> int:
    """
    Move tuition one step up or down, snapping to the step grid.

    Example:
        step_tuition(5893, +1) -> 5950
        step_tuition(5893, -1) -> 5850
        step_tuition(20, -1)   -> 0
    """
    quotient = coerce_amount(tuition) / step
    snapped = int(math.floor(quotient + 0.5)) * step
    if direction >= 0:
        return snapped + step
    return max(0, snapped - step)


def all_decisions_made(student_ids: Iterable[str], student_decisions: Optional[dict]) -> bool:
    """True when the family has students and every one of them has a decision."""
    student_ids = list(student_ids or [])
    decisions = student_decisions or {}
    if not student_ids:
        return False
    return all(AttendanceDecision.parse(decisions.get(sid)) is not None for sid in student_ids)


def resolve_tuition(quote: TuitionQuote, changed_from_contract: bool,
                    contract_tuition: Optional[float] = None) -> float:
    """
    Tuition to show once every attendance decision is made.

    Changed decisions invalidate the stored tuition, so the suggestion wins;
    otherwise the contract's saved tuition stands (if it has one).
    """
    if changed_from_contract or not contract_tuition:
        return quote.suggested_tuition
    return contract_tuition


def student_count_for_contract(contract: ContractRecord) -> int:
    """Number of students attending (full or part time) under a contract."""
    return sum(
        1 for value in contract.student_decisions.values()
        if AttendanceDecision.parse(value) in (AttendanceDecision.FULL_TIME, AttendanceDecision.PART_TIME)
    )


def tuition_totals(contracts: Iterable[ContractRecord]) -> dict:
    """
    Sum committed tuition across a year's contracts.

    Returns:
        {"total": float, "signed": float, "unsigned": float, "students": int}
    """
    totals = {"total": 0.0, "signed": 0.0, "unsigned": 0.0, "students": 0}
    for contract in contracts:
        tuition = coerce_amount(contract.tuition)
        totals["total"] += tuition
        totals["signed" if contract.is_signed else "unsigned"] += tuition
        totals["students"] += student_count_for_contract(contract)
    return totals
