from __future__ import annotations

import math
import re
from decimal import Decimal


SPACER = '<span style="margin-right: 5px;"></span>'

MINUS_SIGN = "−"

# a non-boundary followed by whole groups of three digits up to the end of the run
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def format_integer(value: int | float, separator: str = SPACER) -> str:
    """
    Insert `separator` between every group of three digits, counted from the right.

    format_integer(1234567, ",") -> "1,234,567"
    format_integer(-1234, ",") -> "-1,234"
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return _THOUSANDS.sub(lambda _: separator, str(value))


def format_percent(fraction: float) -> str:
    """Signed percentage with one decimal: 0.25 -> "+25.0%", -0.083 -> "−8.3%"."""
    sign = "+" if fraction >= 0 else MINUS_SIGN
    return f"{sign}{100 * abs(fraction):.1f}%"


def format_number(value: int | float) -> str:
    """
    Plain decimal rendering of a raw number: 1.0 -> "1", 1e-05 -> "0.00001".

    Exponent notation is kept outside [1e-7, 1e21), where it is the shorter form.
    """
    if isinstance(value, int) or not math.isfinite(value):
        return str(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" in text and 1e-7 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    return text
