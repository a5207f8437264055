"""
Year-over-year tuition limits for returning families.
"""

import logging
from typing import Iterable, Optional

from ..config import MAX_YEAR_OVER_YEAR_CHANGE
from ..formatting import coerce_amount, round_currency
from ..models import AttendanceDecision

logger = logging.getLogger(__name__)


def clamp_year_over_year(tuition: float, prior_tuition: Optional[float], *,
                         decisions_unchanged: bool = True,
                         max_change: float = MAX_YEAR_OVER_YEAR_CHANGE) -> float:
    """
    Keep a returning family's tuition within `max_change` of last year's.

    Only applies when there is a prior tuition and the family's attendance
    decisions are the same as last year. When a bound is hit the bound is
    returned rounded to whole currency.

    Example:
        clamp_year_over_year(6000, 5000)  -> 5500
        clamp_year_over_year(4000, 5000)  -> 4500
        clamp_year_over_year(6000, 5000, decisions_unchanged=False) -> 6000
    """
    prior = coerce_amount(prior_tuition, 0.0)
    if not prior or not decisions_unchanged:
        return tuition

    max_up = prior * (1 + max_change)
    max_down = prior * (1 - max_change)

    if tuition > max_up:
        logger.debug("Clamping tuition %s down to %s (prior %s)", tuition, max_up, prior)
        return round_currency(max_up)
    if tuition < max_down:
        logger.debug("Clamping tuition %s up to %s (prior %s)", tuition, max_down, prior)
        return round_currency(max_down)
    return tuition


def decisions_changed(current: Optional[dict], previous: Optional[dict],
                      student_ids: Optional[Iterable[str]] = None) -> bool:
    """
    Whether attendance decisions differ from a previous contract.

    Args:
        current: Student id -> decision on the contract being edited
        previous: Student id -> decision on the earlier contract (None if
            there is no earlier contract)
        student_ids: Students to compare; defaults to every student named in
            either mapping

    Returns:
        True if there is nothing to compare against or any decision differs
    """
    if not previous:
        return True
    current = current or {}

    if student_ids is None:
        student_ids = set(current) | set(previous)

    for student_id in student_ids:
        if AttendanceDecision.parse(current.get(student_id)) != \
                AttendanceDecision.parse(previous.get(student_id)):
            return True
    return False
