from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, ROUND_HALF_EVEN
from fractions import Fraction
from typing import Callable, TypeAlias

from exact_money.utils.numeric_tools import DecimalLike, as_decimal

# A rounding function turns an exact intermediate value into whole minor units.
# It receives a `Decimal` when the value has a terminating decimal expansion, otherwise a `Fraction`.
# `math.ceil`, `math.floor` and `math.trunc` all fit this shape.
RoundingFn: TypeAlias = Callable[[Decimal | Fraction], int]


def round_half_away_from_zero(value: DecimalLike | Fraction) -> int:
    """Round to the nearest integer; ties go away from zero (2.5 -> 3, -2.5 -> -3).

    This is the default for money arithmetic. Python's builtin `round` uses banker's
    rounding instead, so it is not used here.
    """
    if isinstance(value, Fraction):
        magnitude = math.floor(abs(value) + Fraction(1, 2))
        return magnitude if value >= 0 else -magnitude
    return int(as_decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_half_even(value: DecimalLike | Fraction) -> int:
    """Round to the nearest integer; ties go to the even neighbour (banker's rounding)."""
    if isinstance(value, Fraction):
        # `round` on a Fraction is exact and already rounds half to even
        return round(value)
    return int(as_decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_EVEN))


def round_up(value: DecimalLike | Fraction) -> int:
    """Round toward positive infinity."""
    return math.ceil(_exact(value))


def round_down(value: DecimalLike | Fraction) -> int:
    """Round toward negative infinity."""
    return math.floor(_exact(value))


def round_toward_zero(value: DecimalLike | Fraction) -> int:
    """Drop the fractional part."""
    return math.trunc(_exact(value))


def _exact(value: DecimalLike | Fraction) -> Decimal | Fraction:
    return value if isinstance(value, Fraction) else as_decimal(value)
