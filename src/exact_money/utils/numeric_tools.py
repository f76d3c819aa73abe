from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, Decimal, InvalidOperation, localcontext
from fractions import Fraction
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Scalars accepted by `Money.multiply`, `Money.divide` and allocation ratios
Scalar: TypeAlias = int | float | Decimal | Fraction

# Largest decimal exponent (either sign) a value may have before it is made exact as a `Fraction`
EXACT_EXPONENT_LIMIT = 1000


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidOperation: If a string cannot be parsed as a number.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def is_scalar(value) -> bool:
    """Return True if $value is a real number usable in money arithmetic.

    `bool` is excluded even though it is an `int` subclass.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal, Fraction))


def scalar_as_decimal(value: Scalar) -> Decimal | None:
    """Convert a scalar to a finite `Decimal`, or return None if that is not possible."""
    if not is_scalar(value):
        return None

    if isinstance(value, Fraction):
        # Widest exponent range, so huge or tiny fractions never trap with Overflow
        with localcontext() as ctx:
            ctx.Emax, ctx.Emin = MAX_EMAX, MIN_EMIN
            result = Decimal(value.numerator) / Decimal(value.denominator)
    else:
        try:
            result = as_decimal(value)
        except (ValueError, InvalidOperation):
            return None

    if not result.is_finite():
        return None
    return result


def scalar_as_fraction(value: Scalar) -> Fraction | None:
    """Convert a scalar to an exact `Fraction`, or return None if that is not possible.

    Floats go through their shortest string form, so `0.1` becomes exactly 1/10.
    """
    decimal_value = value if isinstance(value, Fraction) else scalar_as_decimal(value)
    if decimal_value is None:
        return None
    return Fraction(decimal_value)


def has_exact_exponent(value: Decimal) -> bool:
    """Return True if $value is zero or its magnitude lies between 1e-1000 and 1e+1000.

    Outside that band an exact `Fraction` would need integers with thousands of digits,
    which is never a meaningful money operand.
    """
    return value.is_zero() or abs(value.adjusted()) <= EXACT_EXPONENT_LIMIT


def fraction_as_exact_decimal(value: Fraction) -> Decimal | None:
    """Return $value as an exact `Decimal` if its decimal expansion terminates, otherwise None.

    Examples:
        >>> fraction_as_exact_decimal(Fraction(1, 4))
        Decimal('0.25')
        >>> fraction_as_exact_decimal(Fraction(1, 3)) is None
        True
    """
    denominator = value.denominator
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None

    scale = max(twos, fives)
    coefficient = value.numerator * (10**scale // value.denominator)
    # Build from the digit tuple; arithmetic like `scaleb` would round to the context precision
    sign, digits, _ = Decimal(coefficient).as_tuple()
    return Decimal((sign, digits, -scale))


def fractional_digits(value: Decimal) -> int:
    """Number of significant digits after the decimal point.

    Trailing zeros do not count, and the exponent is taken into account.

    Examples:
        >>> fractional_digits(Decimal("10.42"))
        2
        >>> fractional_digits(Decimal("10.420"))
        2
        >>> fractional_digits(Decimal("1.5e-2"))
        3
        >>> fractional_digits(Decimal("1E+3"))
        0
    """
    if value.is_zero():
        return 0

    # Strip trailing zeros without `normalize()`, which would round to the context precision
    _, digits, exponent = value.as_tuple()
    digits = list(digits)
    while exponent < 0 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return max(0, -exponent)
