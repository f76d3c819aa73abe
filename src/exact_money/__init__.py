__version__ = "0.1.0"

from exact_money.domain.monetary.allocation import RemainderPolicy
from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_catalog import CurrencyCatalog
from exact_money.domain.monetary.default_catalog import default_catalog
from exact_money.domain.monetary.money import Money
from exact_money.errors import (
    MoneyError,
    UnknownCurrencyError,
    InvalidAmountError,
    PrecisionExceededError,
    MissingFieldError,
    InvalidOperandError,
    CurrencyMismatchError,
    CatalogError,
)
from exact_money.utils.rounding import round_half_away_from_zero

__all__ = [
    "Money",
    "Currency",
    "CurrencyCatalog",
    "RemainderPolicy",
    "default_catalog",
    "round_half_away_from_zero",
    "MoneyError",
    "UnknownCurrencyError",
    "InvalidAmountError",
    "PrecisionExceededError",
    "MissingFieldError",
    "InvalidOperandError",
    "CurrencyMismatchError",
    "CatalogError",
]
