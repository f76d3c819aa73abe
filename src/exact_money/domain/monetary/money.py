from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from exact_money.domain.monetary.allocation import RemainderPolicy, allocate_minor_units
from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_catalog import CurrencyCatalog
from exact_money.domain.monetary.default_catalog import default_catalog
from exact_money.errors import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidOperandError,
    MissingFieldError,
    PrecisionExceededError,
)
from exact_money.utils.numeric_tools import (
    DecimalLike,
    Scalar,
    as_decimal,
    fraction_as_exact_decimal,
    fractional_digits,
    has_exact_exponent,
    scalar_as_decimal,
    scalar_as_fraction,
)
from exact_money.utils.rounding import RoundingFn, round_half_away_from_zero

CurrencyRef = str | Currency


class Money:
    """Represents an exact monetary amount: whole minor units of one currency.

    The amount is always an `int` (e.g., cents for EUR, yen for JPY, fils for BHD), so
    arithmetic never drifts. Instances are immutable; every operation returns a new Money.

    The currency is resolved against a `CurrencyCatalog` at construction. Pass $catalog to
    use a specific one; otherwise the process-wide `default_catalog()` is used.

    Examples:
        >>> price = Money.from_decimal("10.42", "EUR")
        >>> price.amount
        1042
        >>> [share.amount for share in Money(1000, "EUR").allocate([1, 1, 1])]
        [334, 333, 333]
    """

    __slots__ = ("_amount", "_currency")

    # Signed 64-bit range for minor units
    MAX_AMOUNT = 2**63 - 1
    MIN_AMOUNT = -(2**63)

    def __init__(self, amount: int, currency: CurrencyRef, *, catalog: CurrencyCatalog | None = None):
        """Initialize Money from whole minor units.

        Args:
            amount: Minor units. An `int`, or a `Decimal`/`float` holding a whole number.
            currency: Currency code or `Currency`, resolved against $catalog.
            catalog: Catalog to resolve $currency in. Defaults to `default_catalog()`.

        Raises:
            UnknownCurrencyError: If $currency does not resolve.
            InvalidAmountError: If $amount is not a whole number or is out of range.
        """
        resolved_currency = _resolve_currency(currency, catalog)
        object.__setattr__(self, "_amount", _as_minor_units(amount))
        object.__setattr__(self, "_currency", resolved_currency)

    @classmethod
    def _of(cls, amount, currency: Currency) -> Money:
        # $currency is already resolved; skip the catalog round-trip
        money = object.__new__(cls)
        object.__setattr__(money, "_amount", _as_minor_units(amount))
        object.__setattr__(money, "_currency", currency)
        return money

    def __setattr__(self, key, value):
        raise AttributeError(f"Cannot set attribute '{key}' because `Money` is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"Cannot delete attribute '{key}' because `Money` is immutable")

    # region Construction

    @classmethod
    def from_minor_units(
        cls,
        amount: int | Mapping,
        currency: CurrencyRef | None = None,
        *,
        catalog: CurrencyCatalog | None = None,
    ) -> Money:
        """Create Money from whole minor units.

        Also accepts structured input `{"amount": ..., "currency": ...}` as the single
        positional argument, which is the shape produced by `to_serializable`.

        Raises:
            MissingFieldError: If structured input lacks "amount" or "currency".
            UnknownCurrencyError: If the currency does not resolve.
            InvalidAmountError: If the amount is not a whole number.
        """
        amount, currency = _unpack(amount, currency)
        return cls(amount, currency, catalog=catalog)

    @classmethod
    def from_decimal(
        cls,
        amount: DecimalLike | Mapping,
        currency: CurrencyRef | None = None,
        rounding: RoundingFn | None = None,
        *,
        catalog: CurrencyCatalog | None = None,
    ) -> Money:
        """Create Money from a major-unit value such as 10.42 (EUR) or "12.345" (BHD).

        The value is scaled by 10 ** `currency.decimal_digits` and rounded to whole minor units.

        Args:
            amount: Major-unit value as int, float, Decimal, or numeric string (exponent
                notation like "1.5e-2" is accepted). Structured input is accepted too.
            currency: Currency code or `Currency`.
            rounding: Rounding function for the scaled value. When None, values with more
                fractional digits than the currency allows are rejected; otherwise the excess
                is rounded away with this function.
            catalog: Catalog to resolve $currency in.

        Raises:
            MissingFieldError: If structured input lacks "amount" or "currency".
            UnknownCurrencyError: If the currency does not resolve.
            InvalidAmountError: If $amount is not a finite number.
            PrecisionExceededError: If $amount is too precise and no $rounding was given.
        """
        amount, currency = _unpack(amount, currency)
        resolved_currency = _resolve_currency(currency, catalog)

        # Raise: $amount must be a finite number (bool and non-numeric types are rejected)
        if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal, str)):
            raise InvalidAmountError(f"Cannot call `from_decimal` because $amount must be a number or numeric string, but provided value is: {amount!r}")
        try:
            decimal_amount = as_decimal(amount.strip() if isinstance(amount, str) else amount)
        except (ValueError, InvalidOperation) as e:
            raise InvalidAmountError(f"Cannot call `from_decimal` because $amount ({amount!r}) cannot be converted to Decimal") from e
        if not decimal_amount.is_finite():
            raise InvalidAmountError(f"Cannot call `from_decimal` because $amount must be finite, but provided value is: {amount!r}")

        # Raise: reject excess precision unless the caller chose how to round it away
        if rounding is None:
            if fractional_digits(decimal_amount) > resolved_currency.decimal_digits:
                raise PrecisionExceededError(resolved_currency.code, resolved_currency.decimal_digits, amount)
            rounding = round_half_away_from_zero

        # Raise: exponents this far out are never a money value and cannot be made exact cheaply
        if not has_exact_exponent(decimal_amount):
            raise InvalidAmountError(f"Cannot call `from_decimal` because $amount magnitude is out of supported range, but provided value is: {amount!r}")

        scaled = Fraction(decimal_amount) * resolved_currency.minor_units_per_major
        return cls._from_exact(scaled, rounding, resolved_currency, "from_decimal")

    @classmethod
    def from_str(cls, value_str: str, rounding: RoundingFn | None = None, *, catalog: CurrencyCatalog | None = None) -> Money:
        """Parse Money from a string like '10.42 EUR' (the format of `str(money)`).

        Raises:
            InvalidAmountError: If the string format is invalid.
            UnknownCurrencyError: If the currency does not resolve.
            PrecisionExceededError: If the value is too precise and no $rounding was given.
        """
        if not isinstance(value_str, str):
            raise InvalidAmountError(f"$value_str must be a string, but provided value is: {value_str!r}")

        parts = value_str.split()
        if len(parts) != 2:
            raise InvalidAmountError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts
        return cls.from_decimal(value_part, currency_part, rounding, catalog=catalog)

    @classmethod
    def zero(cls, currency: CurrencyRef, *, catalog: CurrencyCatalog | None = None) -> Money:
        """Create zero Money in $currency."""
        return cls(0, currency, catalog=catalog)

    @classmethod
    def _from_exact(cls, value: Fraction, rounding: RoundingFn, currency: Currency, operation: str) -> Money:
        """Round an exact intermediate $value to whole minor units with $rounding.

        $rounding receives an exact `Decimal` when $value terminates, otherwise the `Fraction` itself.
        """
        # Raise: no rounding can bring a value this large back into the 64-bit range
        if abs(value) > cls.MAX_AMOUNT + 1:
            raise InvalidAmountError(f"Cannot call `{operation}` because result is outside [{cls.MIN_AMOUNT}, {cls.MAX_AMOUNT}] minor units")

        exact_decimal = fraction_as_exact_decimal(value)
        exact_value = exact_decimal if exact_decimal is not None else value
        # Rounding functions may raise on values beyond the Decimal context (e.g., quantize)
        try:
            rounded = rounding(exact_value)
        except (InvalidOperation, OverflowError) as e:
            raise InvalidAmountError(f"Cannot call `{operation}` because result {exact_value} cannot be rounded to minor units") from e
        return cls._of(rounded, currency)

    def _with_amount(self, amount: int) -> Money:
        return self._of(amount, self._currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> int:
        """Get the amount in minor units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def currency_code(self) -> str:
        """Get the currency code."""
        return self._currency.code

    # endregion

    # region Checks

    def _check_money(self, other, operation: str) -> None:
        if not isinstance(other, Money):
            raise InvalidOperandError(f"Cannot call `{operation}` because $other must be Money, but provided value is: {other!r}")

    def _check_same_currency(self, other: Money, operation: str) -> None:
        self._check_money(other, operation)
        if self.currency_code != other.currency_code:
            raise CurrencyMismatchError(operation, self.currency_code, other.currency_code)

    @staticmethod
    def _check_scalar(value, operation: str) -> Fraction:
        decimal_value = scalar_as_decimal(value)
        if decimal_value is None:
            raise InvalidOperandError(f"Cannot call `{operation}` because operand must be a finite number, but provided value is: {value!r}")
        # Raise: exponents this far out cannot be made exact cheaply
        if not has_exact_exponent(decimal_value):
            raise InvalidOperandError(f"Cannot call `{operation}` because operand magnitude is out of supported range, but provided value is: {value!r}")
        return scalar_as_fraction(value)

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Return the sum of two Money values in the same currency."""
        self._check_same_currency(other, "add")
        return self._with_amount(self._amount + other._amount)

    def subtract(self, other: Money) -> Money:
        """Return this value minus $other (same currency)."""
        self._check_same_currency(other, "subtract")
        return self._with_amount(self._amount - other._amount)

    def multiply(self, factor: Scalar, rounding: RoundingFn = round_half_away_from_zero) -> Money:
        """Multiply by a number and round the exact product to whole minor units.

        Args:
            factor: Finite int, float, Decimal or Fraction. Floats are taken at their
                shortest string form, so 1.2234 means exactly 1.2234.
            rounding: Rounding function. Defaults to round-half-away-from-zero.

        Raises:
            InvalidOperandError: If $factor is not a finite number.
            InvalidAmountError: If the rounded product is outside the 64-bit range.
        """
        scalar = self._check_scalar(factor, "multiply")
        return self._from_exact(self._amount * scalar, rounding, self._currency, "multiply")

    def divide(self, divisor: Scalar, rounding: RoundingFn = round_half_away_from_zero) -> Money:
        """Divide by a number and round the quotient to whole minor units.

        Raises:
            InvalidOperandError: If $divisor is not a finite number, or is zero.
            InvalidAmountError: If the rounded quotient is outside the 64-bit range.
        """
        scalar = self._check_scalar(divisor, "divide")
        # Raise: division by zero has no meaningful amount
        if scalar == 0:
            raise InvalidOperandError(f"Cannot call `divide` because $divisor is zero for {self}")
        return self._from_exact(self._amount / scalar, rounding, self._currency, "divide")

    def negate(self) -> Money:
        """Return the value with its sign flipped."""
        return self._with_amount(-self._amount)

    def absolute(self) -> Money:
        """Return the absolute value."""
        return self._with_amount(abs(self._amount))

    def allocate(self, ratios: Sequence[Scalar], policy: RemainderPolicy = RemainderPolicy.SEQUENTIAL) -> list[Money]:
        """Split this amount proportionally to $ratios without losing or creating minor units.

        See `allocate_minor_units` for the algorithm.

        Returns:
            One Money per ratio, in order, all in this currency, summing to this amount.

        Raises:
            InvalidOperandError: If $ratios is empty, invalid, or sums to zero.
        """
        return [self._with_amount(share) for share in allocate_minor_units(self._amount, ratios, policy)]

    # endregion

    # region Comparison

    def equals(self, other: Money) -> bool:
        """Return True if amount and currency both match.

        Raises:
            InvalidOperandError: If $other is not Money.
        """
        self._check_money(other, "equals")
        return self._amount == other._amount and self.currency_code == other.currency_code

    def compare(self, other: Money) -> int:
        """Return -1, 0 or 1 as this amount is less than, equal to or greater than $other's.

        Raises:
            InvalidOperandError: If $other is not Money.
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other, "compare")
        return (self._amount > other._amount) - (self._amount < other._amount)

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) > 0

    def greater_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) >= 0

    def less_than(self, other: Money) -> bool:
        return self.compare(other) < 0

    def less_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) <= 0

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Conversion

    def to_display_string(self) -> str:
        """Fixed-point major-unit string with exactly `decimal_digits` fractional digits.

        Examples: 1042 EUR -> '10.42', -5 EUR -> '-0.05', 12345 JPY -> '12345'.
        """
        digits = self._currency.decimal_digits
        return f"{Decimal(self._amount).scaleb(-digits):.{digits}f}"

    def to_decimal(self) -> Decimal:
        """Major-unit value as Decimal (e.g., 1000 EUR cents -> Decimal('10.00'))."""
        return Decimal(self.to_display_string())

    def to_serializable(self) -> dict:
        """Return the canonical `{"amount": int, "currency": str}` form."""
        return {"amount": self._amount, "currency": self.currency_code}

    def format(self, symbol: bool = True) -> str:
        """Human-readable string such as '€10.42' or '-$0.05'; with $symbol=False, '10.42 EUR'."""
        if not symbol or not self._currency.symbol:
            return str(self)
        sign = "-" if self._amount < 0 else ""
        return f"{sign}{self._currency.symbol}{self.absolute().to_display_string()}"

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self.currency_code))

    def __lt__(self, other) -> bool:
        return self.less_than(other)

    def __le__(self, other) -> bool:
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        return self.greater_than_or_equal(other)

    def __add__(self, other) -> Money:
        return self.add(other)

    def __sub__(self, other) -> Money:
        return self.subtract(other)

    def __mul__(self, factor) -> Money:
        return self.multiply(factor)

    def __rmul__(self, factor) -> Money:
        return self.multiply(factor)

    def __truediv__(self, divisor) -> Money:
        return self.divide(divisor)

    def __neg__(self) -> Money:
        return self.negate()

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return self.absolute()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '10.42 EUR'."""
        return f"{self.to_display_string()} {self.currency_code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1042, EUR)'."""
        return f"{self.__class__.__name__}({self._amount}, {self.currency_code})"

    # endregion


def _resolve_currency(currency: CurrencyRef, catalog: CurrencyCatalog | None) -> Currency:
    return (catalog if catalog is not None else default_catalog()).resolve(currency)


def _unpack(amount, currency) -> tuple:
    """Split structured `{"amount", "currency"}` input; pass positional input through."""
    if not isinstance(amount, Mapping):
        return amount, currency

    data = amount
    for field in ("amount", "currency"):
        if field not in data or data[field] is None:
            raise MissingFieldError(field)
    return data["amount"], data["currency"]


def _as_minor_units(amount) -> int:
    """Validate $amount as whole minor units within the signed 64-bit range."""
    # Raise: bool is an int subclass but never a meaningful amount
    if isinstance(amount, bool):
        raise InvalidAmountError(f"$amount must be whole minor units, but provided value is: {amount!r}")

    if isinstance(amount, int):
        minor_units = amount
    elif isinstance(amount, (float, Decimal)):
        decimal_amount = as_decimal(amount)
        # Raise: minor units are never fractional; this constructor never infers decimal scaling
        if not decimal_amount.is_finite() or decimal_amount != decimal_amount.to_integral_value():
            raise InvalidAmountError(f"$amount must be whole minor units, but provided value is: {amount!r}. Use `Money.from_decimal` for major-unit values")
        minor_units = int(decimal_amount)
    else:
        raise InvalidAmountError(f"$amount must be an integer number of minor units, but provided value is: {amount!r}")

    # Raise: amount must fit into signed 64 bits
    if not Money.MIN_AMOUNT <= minor_units <= Money.MAX_AMOUNT:
        raise InvalidAmountError(f"$amount must be within [{Money.MIN_AMOUNT}, {Money.MAX_AMOUNT}], but provided value is: {minor_units}")

    return minor_units
