from __future__ import annotations

import pytest

from gas_efficiency.services.formatting import (
    MINUS_SIGN,
    SPACER,
    format_integer,
    format_number,
    format_percent,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (1234567, "1,234,567"),
        (100000, "100,000"),
        (-1234, "-1,234"),
        (-123, "-123"),
        (1234567.0, "1,234,567"),
    ],
)
def test_format_integer_groups_by_three(value, expected):
    assert format_integer(value, ",") == expected


def test_format_integer_defaults_to_spacer_markup():
    assert format_integer(1234567) == f"1{SPACER}234{SPACER}567"


def test_format_integer_separator_is_inserted_literally():
    assert format_integer(1234, "\\1") == "1\\1234"


def test_format_percent_positive_and_zero():
    assert format_percent(0.25) == "+25.0%"
    assert format_percent(0) == "+0.0%"
    assert format_percent(-0.0) == "+0.0%"


def test_format_percent_negative_uses_minus_sign():
    assert format_percent(-0.083) == f"{MINUS_SIGN}8.3%"
    assert format_percent(-1) == f"{MINUS_SIGN}100.0%"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, "1"),
        (0.15, "0.15"),
        (178.05, "178.05"),
        (1e-05, "0.00001"),
        (1.5e-06, "0.0000015"),
        (1e-08, "1e-08"),
        (1e16, "10000000000000000"),
        (3, "3"),
    ],
)
def test_format_number_prints_plain_decimals(value, expected):
    assert format_number(value) == expected
