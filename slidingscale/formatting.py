"""
Currency and number helpers.

Form inputs arrive as whatever the user typed (or nothing at all), so the
calculator coerces instead of raising. Everything here is pure.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional

_NON_DIGITS = re.compile(r"[^0-9]")


def coerce_amount(value, default: float = 0.0) -> float:
    """
    Turn a user-supplied amount into a usable float.

    Numbers and numeric strings pass through; None, NaN, infinities and
    garbage become `default`. Negative amounts are NOT clamped here.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def coerce_count(value) -> int:
    """Coerce a student count; anything missing, invalid or negative is 0."""
    number = coerce_amount(value, 0.0)
    if number <= 0:
        return 0
    return int(number)


def round_currency(value) -> int:
    """
    Round to whole currency units, halves rounding up.

    Examples:
        round_currency(1234.5)  -> 1235
        round_currency(-0.5)    -> 0
    """
    return int(math.floor(coerce_amount(value) + 0.5))


def format_currency(amount: Optional[float]) -> str:
    """
    Render an amount as US-dollar text with no decimal places.

    Examples:
        format_currency(12345)    -> "$12,345"
        format_currency(999.5)    -> "$1,000"
        format_currency(-1500)    -> "-$1,500"
        format_currency(None)     -> "$0"
    """
    try:
        value = Decimal(str(coerce_amount(amount)))
    except InvalidOperation:
        value = Decimal(0)
    # Locale formatting rounds halves away from zero
    whole = int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    return f"{sign}${abs(whole):,}"


def parse_currency(text) -> int:
    """
    Parse a currency input field ("$75,000") into whole units.

    Every non-digit is dropped, so "$1,000.50" reads as 100050 exactly as
    the income field does; an empty result is 0.
    """
    if text is None:
        return 0
    digits = _NON_DIGITS.sub("", str(text))
    return int(digits) if digits else 0
