from decimal import Decimal
from fractions import Fraction

import pytest

from exact_money.utils.rounding import (
    round_down,
    round_half_away_from_zero,
    round_half_even,
    round_toward_zero,
    round_up,
)


@pytest.mark.parametrize(
    "value, expected",
    [("2.5", 3), ("-2.5", -3), ("2.4", 2), ("-2.6", -3), ("0.5", 1), ("3", 3)],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(Decimal(value)) == expected


def test_round_half_even():
    assert round_half_even(Decimal("2.5")) == 2
    assert round_half_even(Decimal("3.5")) == 4


def test_directed_rounding():
    assert round_up(Decimal("-1.5")) == -1
    assert round_down(Decimal("-1.5")) == -2
    assert round_toward_zero(Decimal("-1.5")) == -1
    assert round_toward_zero(Decimal("1.5")) == 1


def test_results_are_int():
    assert isinstance(round_half_away_from_zero(1.5), int)
    assert isinstance(round_up(1.5), int)


@pytest.mark.parametrize(
    "value, expected",
    [(Fraction(5, 2), 3), (Fraction(-5, 2), -3), (Fraction(1, 3), 0), (Fraction(2, 3), 1), (Fraction(-2, 3), -1)],
)
def test_round_half_away_from_zero_accepts_fraction(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_fraction_rounding_is_exact():
    # 1/3 has no finite Decimal form; a truncated one would floor 3 * (1/3) to 0
    assert round_down(3 * Fraction(1, 3)) == 1
    assert round_up(Fraction(1, 3)) == 1
    assert round_toward_zero(Fraction(-7, 3)) == -2
    assert round_half_even(Fraction(5, 2)) == 2
    assert round_half_even(Fraction(7, 2)) == 4
    assert isinstance(round_half_even(Fraction(7, 2)), int)
