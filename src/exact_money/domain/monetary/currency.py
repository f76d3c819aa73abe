from __future__ import annotations


class Currency:
    """Represents a currency with ISO code, minor-unit digits, and display metadata.

    Instances are read-only; equality and hashing use $code only.

    Attributes:
        code (str): ISO 4217 alphabetic code (e.g., "USD", "BHD").
        decimal_digits (int): Number of minor-unit digits (0 for JPY, 2 for EUR, 3 for BHD).
        numeric_code (int): ISO 4217 numeric code (e.g., 840 for USD).
        symbol (str): Display symbol (e.g., "$", "€").
        name (str): Full currency name.
    """

    __slots__ = ("_code", "_decimal_digits", "_numeric_code", "_symbol", "_name")

    def __init__(self, code: str, decimal_digits: int, numeric_code: int, symbol: str, name: str = "") -> None:
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD"). Stored upper-case and stripped.
            decimal_digits (int): Number of minor-unit digits, >= 0.
            numeric_code (int): ISO 4217 numeric code, >= 0.
            symbol (str): Display symbol. May be empty.
            name (str): Full currency name. Defaults to $code.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Raise: $code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: $decimal_digits must be a non-negative integer
        if isinstance(decimal_digits, bool) or not isinstance(decimal_digits, int) or decimal_digits < 0:
            raise ValueError(f"$decimal_digits must be a non-negative integer, but provided value is: {decimal_digits}")

        # Raise: $numeric_code must be a non-negative integer
        if isinstance(numeric_code, bool) or not isinstance(numeric_code, int) or numeric_code < 0:
            raise ValueError(f"$numeric_code must be a non-negative integer, but provided value is: {numeric_code}")

        if not isinstance(symbol, str):
            raise ValueError(f"$symbol must be a string, but provided value is: {symbol!r}")

        object.__setattr__(self, "_code", code.upper().strip())
        object.__setattr__(self, "_decimal_digits", decimal_digits)
        object.__setattr__(self, "_numeric_code", numeric_code)
        object.__setattr__(self, "_symbol", symbol)
        object.__setattr__(self, "_name", name.strip() if name and name.strip() else self._code)

    def __setattr__(self, key, value):
        raise AttributeError(f"Cannot set attribute '{key}' because `Currency` is immutable")

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def decimal_digits(self) -> int:
        """Get the number of minor-unit digits."""
        return self._decimal_digits

    @property
    def numeric_code(self) -> int:
        """Get the ISO 4217 numeric code."""
        return self._numeric_code

    @property
    def symbol(self) -> str:
        """Get the display symbol."""
        return self._symbol

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def minor_units_per_major(self) -> int:
        """Scaling factor between major and minor units (10 ** $decimal_digits)."""
        return 10**self._decimal_digits

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.decimal_digits}, {self.numeric_code}, '{self.symbol}', '{self.name}')"
