from __future__ import annotations

import logging
import math

from exact_money import Money, RemainderPolicy
from exact_money.domain.monetary.currency_registry import EUR


logger = logging.getLogger(__name__)


def main() -> None:
    # 10.00 EUR, stored as 1000 cents
    ten_eur = Money(1000, EUR)

    five_eur = ten_eur.divide(2)
    twenty_eur = ten_eur.multiply(2)
    logger.info(f"{ten_eur} / 2 = {five_eur}, {ten_eur} * 2 = {twenty_eur}")

    # Split without losing a cent: [3.34, 3.33, 3.33]
    shares = ten_eur.allocate([1, 1, 1])
    logger.info(f"Allocated {ten_eur} into {[str(share) for share in shares]}")

    # A recipient with ratio 0 never gets leftover cents under this policy
    shares = Money(5, EUR).allocate([0, 1, 1], policy=RemainderPolicy.SKIP_ZERO_RATIO)
    logger.info(f"Allocated 0.05 EUR into {[str(share) for share in shares]}")

    # Major-unit input is checked against the currency's digits
    price = Money.from_decimal(15.62, "USD")
    logger.info(f"Parsed price {price.format()} ({price.amount} minor units)")

    # Opt into rounding explicitly when the input is too precise
    rate_based = Money.from_decimal("12.3456", "BHD", math.floor)
    logger.info(f"Floored to {rate_based} -> {rate_based.to_serializable()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
