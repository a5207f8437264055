import pytest

from slidingscale.formatting import (
    format_currency,
    round_currency,
    parse_currency,
    coerce_amount,
    coerce_count,
)


@pytest.mark.parametrize("amount, expected", [
    (12345, "$12,345"),
    (0, "$0"),
    (None, "$0"),
    (999.5, "$1,000"),
    (1234567.4, "$1,234,567"),
    (-1500, "-$1,500"),
    (625.0, "$625"),
    (float("nan"), "$0"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_round_currency_rounds_halves_up():
    assert round_currency(20312.5) == 20313
    assert round_currency(1234.49) == 1234
    assert round_currency(-2.5) == -2
    assert round_currency(None) == 0


@pytest.mark.parametrize("text, expected", [
    ("$75,000", 75000),
    ("75000", 75000),
    ("", 0),
    (None, 0),
    ("abc", 0),
])
def test_parse_currency(text, expected):
    assert parse_currency(text) == expected


def test_coerce_helpers():
    assert coerce_amount("12.5") == 12.5
    assert coerce_amount(True) == 0.0
    assert coerce_amount(None, 7.0) == 7.0
    assert coerce_count(2.9) == 2
    assert coerce_count("3") == 3
    assert coerce_count(-1) == 0
