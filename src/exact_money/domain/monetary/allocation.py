from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from enum import Enum
from fractions import Fraction

from exact_money.errors import InvalidOperandError
from exact_money.utils.numeric_tools import Scalar, has_exact_exponent, scalar_as_decimal, scalar_as_fraction

logger = logging.getLogger(__name__)


class RemainderPolicy(Enum):
    """How leftover minor units are handed out after base shares are floored.

    SEQUENTIAL: one unit each to index 0, 1, 2, ... (wrapping) until nothing is left.
    SKIP_ZERO_RATIO: same order, but recipients whose ratio is zero are passed over.
        The test is on the ratio, not on the floored base share: a recipient with a positive
        ratio whose base share floors to zero still takes part, so the leftover always finds
        a recipient.
    """

    SEQUENTIAL = "SEQUENTIAL"
    SKIP_ZERO_RATIO = "SKIP_ZERO_RATIO"


def allocate_minor_units(amount: int, ratios: Sequence[Scalar], policy: RemainderPolicy = RemainderPolicy.SEQUENTIAL) -> list[int]:
    """Split $amount into len($ratios) integer shares proportional to $ratios.

    Every share starts at floor($amount * ratio / total). The shortfall against $amount
    (always between 0 and len($ratios) - 1) is then distributed one unit at a time
    according to $policy. The shares always sum to $amount exactly.

    Args:
        amount: Whole minor units to split. May be negative.
        ratios: Non-negative finite numbers with a positive sum.
        policy: Remainder distribution policy.

    Returns:
        Shares in the same order as $ratios.

    Raises:
        InvalidOperandError: If $ratios is empty, holds a negative, non-finite or non-numeric
            value, or sums to zero.

    Examples:
        >>> allocate_minor_units(1000, [1, 1, 1])
        [334, 333, 333]
        >>> allocate_minor_units(5, [70, 30])
        [4, 1]
    """
    if isinstance(ratios, (str, bytes)) or not isinstance(ratios, Sequence):
        raise InvalidOperandError(f"$ratios must be a sequence of numbers, but provided value is: {ratios!r}")

    # Raise: at least one recipient is needed
    if len(ratios) == 0:
        raise InvalidOperandError("Cannot call `allocate` because $ratios is empty")

    exact_ratios = [_as_ratio(ratio) for ratio in ratios]
    total = sum(exact_ratios, Fraction(0))

    # Raise: proportions are undefined when every ratio is zero
    if total == 0:
        raise InvalidOperandError(f"Cannot call `allocate` because $ratios sum to zero: {list(ratios)}")

    # Exact rational floor, so float noise never leaks into the shares
    shares = [math.floor(amount * ratio / total) for ratio in exact_ratios]
    remainder = amount - sum(shares)

    if remainder:
        if policy is RemainderPolicy.SKIP_ZERO_RATIO:
            recipients = [i for i, ratio in enumerate(exact_ratios) if ratio > 0]
        else:
            recipients = list(range(len(shares)))

        logger.debug(f"Distributing remainder of {remainder} minor unit(s) over {len(recipients)} recipient(s) using {policy.name}")
        for step in range(remainder):
            shares[recipients[step % len(recipients)]] += 1

    return shares


def _as_ratio(value: Scalar) -> Fraction:
    decimal_ratio = scalar_as_decimal(value)
    # Raise: each ratio must be a finite number
    if decimal_ratio is None:
        raise InvalidOperandError(f"Each ratio must be a finite number, but provided value is: {value!r}")
    # Raise: exponents this far out cannot be made exact cheaply
    if not has_exact_exponent(decimal_ratio):
        raise InvalidOperandError(f"Each ratio magnitude must be within supported range, but provided value is: {value!r}")
    ratio = scalar_as_fraction(value)
    # Raise: negative ratios would allow shares larger than the amount
    if ratio < 0:
        raise InvalidOperandError(f"Each ratio must be non-negative, but provided value is: {value!r}")
    return ratio
