from decimal import Decimal
from fractions import Fraction

import pytest

from exact_money.utils.numeric_tools import (
    as_decimal,
    fraction_as_exact_decimal,
    fractional_digits,
    has_exact_exponent,
    is_scalar,
    scalar_as_decimal,
    scalar_as_fraction,
)


def test_as_decimal_goes_through_str_for_floats():
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal("1.5e-2") == Decimal("0.015")


@pytest.mark.parametrize(
    "value, expected",
    [("10.42", 2), ("10.420", 2), ("1.5e-2", 3), ("1E+3", 0), ("0.00", 0), ("-0.005", 3), ("12345", 0)],
)
def test_fractional_digits(value, expected):
    assert fractional_digits(Decimal(value)) == expected


def test_is_scalar():
    assert is_scalar(1) and is_scalar(1.5) and is_scalar(Decimal("1")) and is_scalar(Fraction(1, 3))
    assert not is_scalar(True)
    assert not is_scalar("1")
    assert not is_scalar(None)


def test_scalar_conversions():
    assert scalar_as_decimal(Fraction(1, 4)) == Decimal("0.25")
    assert scalar_as_decimal(float("inf")) is None
    assert scalar_as_fraction(0.1) == Fraction(1, 10)
    assert scalar_as_fraction("0.1") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (Fraction(1, 4), Decimal("0.25")),
        (Fraction(-6117, 5), Decimal("-1223.4")),
        (Fraction(7), Decimal("7")),
        (Fraction(1, 2**10), Decimal("0.0009765625")),
        (Fraction(1, 3), None),
        (Fraction(1, 6), None),
    ],
)
def test_fraction_as_exact_decimal(value, expected):
    assert fraction_as_exact_decimal(value) == expected


def test_fraction_as_exact_decimal_keeps_every_digit():
    value = Fraction(10**40 + 1, 10**40)

    assert fraction_as_exact_decimal(value) == Decimal("1.0000000000000000000000000000000000000001")
    assert Fraction(fraction_as_exact_decimal(value)) == value


def test_has_exact_exponent():
    assert has_exact_exponent(Decimal("0E-999999"))
    assert has_exact_exponent(Decimal("1e1000"))
    assert has_exact_exponent(Decimal("1.5e-1000"))
    assert not has_exact_exponent(Decimal("1e1001"))
    assert not has_exact_exponent(Decimal("1e-999999"))
