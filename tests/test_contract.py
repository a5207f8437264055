"""Tests for the year-over-year clamp and contract tuition quotes."""

import pytest

from slidingscale.engines import (
    clamp_year_over_year,
    decisions_changed,
    ContractTuitionEngine,
    tuition_for_income,
    assistance_amount,
    step_tuition,
    all_decisions_made,
    resolve_tuition,
    student_count_for_contract,
    tuition_totals,
)
from slidingscale.formatting import round_currency
from slidingscale.models import AttendanceDecision, FamilyRecord, ContractRecord

FT = AttendanceDecision.FULL_TIME
PT = AttendanceDecision.PART_TIME
NA = AttendanceDecision.NOT_ATTENDING


def _family(income=74000, opt_out=False, students=("ana", "luis")):
    return FamilyRecord(
        id="garcia",
        name="Garcia",
        gross_income=income,
        sliding_scale_opt_out=opt_out,
        student_ids=list(students),
    )


def _prior(decisions, tuition):
    return ContractRecord(
        id="garcia", year_id="2024-2025", family_id="garcia",
        student_decisions=decisions, tuition=tuition,
    )


# -----------------------------------------------------------------------------
# Year over year
# -----------------------------------------------------------------------------

def test_clamp_caps_increase():
    assert clamp_year_over_year(6000, 5000) == 5500


def test_clamp_caps_decrease():
    assert clamp_year_over_year(4000, 5000) == 4500


def test_clamp_within_band_is_untouched():
    assert clamp_year_over_year(5321.5, 5000) == 5321.5


def test_clamp_skipped_when_decisions_changed():
    assert clamp_year_over_year(6000, 5000, decisions_unchanged=False) == 6000


@pytest.mark.parametrize("prior", [None, 0])
def test_clamp_skipped_without_prior(prior):
    assert clamp_year_over_year(6000, prior) == 6000


def test_clamp_custom_band():
    assert clamp_year_over_year(7000, 5000, max_change=0.2) == 6000


def test_decisions_changed():
    current = {"a": "Full Time", "b": "Part Time"}
    assert decisions_changed(current, None)
    assert decisions_changed(current, {})
    assert not decisions_changed(current, {"a": FT, "b": PT})
    assert decisions_changed(current, {"a": FT, "b": FT})
    assert decisions_changed(current, {"a": FT})
    # Restricting to the family's students ignores stale entries
    assert not decisions_changed({"a": FT}, {"a": FT, "gone": PT}, ["a"])


# -----------------------------------------------------------------------------
# Quotes
# -----------------------------------------------------------------------------

def test_quote_new_family(example_year):
    engine = ContractTuitionEngine(example_year)
    quote = engine.quote(_family(), {"ana": FT, "luis": FT})

    expected = round_currency(tuition_for_income(74000, example_year, full_time=1, siblings=1))
    assert quote.sliding_scale_tuition == expected
    assert quote.minimum_tuition == expected
    assert quote.suggested_tuition == expected
    assert quote.slider_max == expected * 2
    assert not quote.year_over_year_applied
    assert quote.composition.siblings == 1


def test_quote_rates(example_year):
    quote = ContractTuitionEngine(example_year).quote(_family(), {"ana": FT, "luis": NA})
    full = round_currency(tuition_for_income(74000, example_year, full_time=1))
    both = round_currency(tuition_for_income(74000, example_year, full_time=1, siblings=1))
    part = round_currency(tuition_for_income(74000, example_year, part_time=1))

    assert quote.full_time_rate == full
    assert quote.sibling_rate == both - full
    assert quote.part_time_rate == part


def test_quote_returning_family_is_clamped(example_year):
    decisions = {"ana": FT, "luis": FT}
    quote = ContractTuitionEngine(example_year).quote(
        _family(), decisions, _prior(dict(decisions), 8000),
    )

    assert quote.year_over_year_applied
    assert quote.minimum_tuition == 8800
    assert quote.prior_tuition == 8000
    assert quote.suggested_tuition == max(quote.sliding_scale_tuition, 8800)


def test_quote_returning_family_with_new_decisions_is_not_clamped(example_year):
    quote = ContractTuitionEngine(example_year).quote(
        _family(), {"ana": FT, "luis": FT}, _prior({"ana": FT, "luis": PT}, 8000),
    )

    assert not quote.year_over_year_applied
    assert quote.minimum_tuition == quote.sliding_scale_tuition
    assert quote.prior_tuition is None


def test_quote_high_income_minimum_saturates(example_year):
    quote = ContractTuitionEngine(example_year).quote(_family(income=400000), {"ana": FT})
    assert quote.minimum_tuition == 12500
    assert quote.suggested_tuition == 12500


def test_quote_opt_out_pays_full_rate(example_year):
    quote = ContractTuitionEngine(example_year).quote(
        _family(income=None, opt_out=True), {"ana": FT, "luis": PT},
    )
    assert quote.sliding_scale_tuition == round_currency(12500 * 1.625)


def test_quote_without_attendance(example_year):
    quote = ContractTuitionEngine(example_year).quote(_family(), {})
    assert quote.sliding_scale_tuition == 0
    assert quote.suggested_tuition == 0


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def test_assistance_amount():
    assert assistance_amount(5000, 5500) == 500
    assert assistance_amount(6000, 5500) == 0
    assert assistance_amount(5500, 5500) == 0


@pytest.mark.parametrize("tuition, direction, expected", [
    (5893, 1, 5950),
    (5893, -1, 5850),
    (5900, 1, 5950),
    (20, -1, 0),
    (0, -1, 0),
])
def test_step_tuition(tuition, direction, expected):
    assert step_tuition(tuition, direction) == expected


def test_all_decisions_made():
    assert all_decisions_made(["a", "b"], {"a": "Full Time", "b": "Not Attending"})
    assert not all_decisions_made(["a", "b"], {"a": "Full Time"})
    assert not all_decisions_made(["a"], {"a": ""})
    assert not all_decisions_made([], {"a": "Full Time"})


def test_resolve_tuition(example_year):
    quote = ContractTuitionEngine(example_year).quote(_family(), {"ana": FT})
    assert resolve_tuition(quote, True, 9999) == quote.suggested_tuition
    assert resolve_tuition(quote, False, 9999) == 9999
    assert resolve_tuition(quote, False, None) == quote.suggested_tuition


def test_tuition_totals():
    contracts = [
        ContractRecord("a", "y", "a", {"s1": FT, "s2": PT}, tuition=10000, is_signed=True),
        ContractRecord("b", "y", "b", {"s3": "Full Time", "s4": NA}, tuition=4000),
        ContractRecord("c", "y", "c", {"s5": None}),
    ]
    assert student_count_for_contract(contracts[0]) == 2
    assert tuition_totals(contracts) == {
        "total": 14000.0,
        "signed": 10000.0,
        "unsigned": 4000.0,
        "students": 3,
    }
