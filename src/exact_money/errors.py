"""
Exception types for exact_money.

Each error also derives from the builtin exception a caller would naturally catch
(`ValueError`, `TypeError`, `KeyError`), so code written against plain builtins keeps working.
"""

from __future__ import annotations

__all__ = [
    "MoneyError",
    "UnknownCurrencyError",
    "InvalidAmountError",
    "PrecisionExceededError",
    "MissingFieldError",
    "InvalidOperandError",
    "CurrencyMismatchError",
    "CatalogError",
]


class MoneyError(Exception):
    """Base class for all errors raised by exact_money."""

    pass


class UnknownCurrencyError(MoneyError, ValueError):
    """Raised when a currency code or Currency does not resolve in the catalog."""

    def __init__(self, currency_ref, available: list[str] | None = None):
        message = f"Unrecognized currency: '{currency_ref}'"
        if available is not None:
            message += f". Available currencies: {available}"
        super().__init__(message)
        self.currency_ref = currency_ref


class InvalidAmountError(MoneyError, ValueError):
    """Raised when an amount is not a whole number of minor units, or cannot be parsed."""

    pass


class PrecisionExceededError(MoneyError, ValueError):
    """Raised when a decimal amount has more fractional digits than its currency allows."""

    def __init__(self, currency_code: str, decimal_digits: int, amount=None):
        message = f"The currency {currency_code} supports only {decimal_digits} decimal digits"
        if amount is not None:
            message += f", but provided value is: {amount}"
        super().__init__(message)
        self.currency_code = currency_code
        self.decimal_digits = decimal_digits
        self.amount = amount


class MissingFieldError(MoneyError, KeyError):
    """Raised when structured input lacks the `amount` or `currency` field."""

    def __init__(self, field: str):
        super().__init__(f"Structured money input is missing required field '{field}'")
        self.field = field

    def __str__(self) -> str:
        # KeyError quotes its argument by default; keep the plain message
        return str(self.args[0])


class InvalidOperandError(MoneyError, TypeError):
    """Raised when an operand is not Money, or a scalar is not a finite number."""

    pass


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when two Money values with different currencies meet in one operation."""

    def __init__(self, operation: str, left_code: str, right_code: str):
        super().__init__(f"Cannot call `{operation}` because currencies differ: '{left_code}' and '{right_code}'")
        self.operation = operation
        self.left_code = left_code
        self.right_code = right_code


class CatalogError(MoneyError, ValueError):
    """Raised when currency catalog data is malformed."""

    pass
