from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

import pandas as pd

from exact_money.domain.monetary.currency import Currency
from exact_money.errors import CatalogError, UnknownCurrencyError

logger = logging.getLogger(__name__)

# Columns expected in catalog DataFrames / CSV files ("name" is optional)
REQUIRED_COLUMNS = ("code", "decimal_digits", "numeric_code", "symbol")


class CurrencyCatalog:
    """Read-only lookup table from currency code to `Currency`.

    The catalog is populated once at construction and never changes afterwards, so the
    same instance can be shared freely between threads. Use `merged` to derive a new
    catalog with extra or overriding entries.

    Examples:
        >>> catalog = CurrencyCatalog([Currency("EUR", 2, 978, "€", "Euro")])
        >>> catalog.lookup("eur").decimal_digits
        2
        >>> catalog.lookup("XXX") is None
        True
    """

    __slots__ = ("_currencies_by_code",)

    def __init__(self, currencies: Iterable[Currency]) -> None:
        """Build a catalog from $currencies.

        Raises:
            CatalogError: If an item is not a `Currency` or a code appears twice.
        """
        currencies_by_code: dict[str, Currency] = {}
        for currency in currencies:
            # Raise: only Currency instances belong in the catalog
            if not isinstance(currency, Currency):
                raise CatalogError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

            # Raise: codes must be unique
            if currency.code in currencies_by_code:
                raise CatalogError(f"Currency with code '{currency.code}' appears more than once in catalog data")

            currencies_by_code[currency.code] = currency

        self._currencies_by_code: Mapping[str, Currency] = MappingProxyType(currencies_by_code)

    # region Lookup

    def lookup(self, code: str) -> Currency | None:
        """Return the `Currency` for $code, or None when the code is unknown.

        Codes are matched case-insensitively.
        """
        if not isinstance(code, str):
            return None
        return self._currencies_by_code.get(code.upper().strip())

    def get(self, code: str) -> Currency:
        """Return the `Currency` for $code.

        Raises:
            UnknownCurrencyError: If $code is not in the catalog.
        """
        currency = self.lookup(code)
        if currency is None:
            raise UnknownCurrencyError(code, self.codes())
        return currency

    def resolve(self, currency_ref: str | Currency) -> Currency:
        """Resolve a currency code or `Currency` object to this catalog's entry.

        A `Currency` object is resolved by its code, so the catalog's metadata wins.

        Raises:
            UnknownCurrencyError: If $currency_ref does not resolve.
        """
        code = currency_ref.code if isinstance(currency_ref, Currency) else currency_ref
        currency = self.lookup(code)
        if currency is None:
            raise UnknownCurrencyError(currency_ref)
        return currency

    def codes(self) -> list[str]:
        """Return all currency codes, sorted."""
        return sorted(self._currencies_by_code)

    # endregion

    # region Derivation

    def merged(self, other: CurrencyCatalog | Iterable[Currency]) -> CurrencyCatalog:
        """Return a new catalog with entries of $other added to (or replacing) this one's."""
        others = list(other)
        combined = dict(self._currencies_by_code)
        overridden = [currency.code for currency in others if currency.code in combined]
        combined.update({currency.code: currency for currency in others})
        logger.debug(f"Merged {len(others)} currency(ies) into catalog; overridden: {overridden}")
        return CurrencyCatalog(combined.values())

    # endregion

    # region Container protocol

    def __contains__(self, code) -> bool:
        return self.lookup(code) is not None

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies_by_code.values())

    def __len__(self) -> int:
        return len(self._currencies_by_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} currencies)"

    # endregion


def catalog_from_dataframe(df: pd.DataFrame) -> CurrencyCatalog:
    """Build a `CurrencyCatalog` from a pandas DataFrame with one row per currency.

    Input DataFrame requirements:
    - Columns: code, decimal_digits, numeric_code, symbol. Optional: name.
    - Values: $decimal_digits and $numeric_code must be whole numbers.

    Raises:
        CatalogError: If $df is not a DataFrame, misses columns, or holds invalid rows.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise CatalogError(f"Expected a pandas DataFrame, but received {type(df).__name__}")

    # Check: required columns present (name is optional)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"The provided DataFrame is missing required columns: {', '.join(missing)}")

    has_name = "name" in df.columns
    currencies = []
    for row_number, row in enumerate(df.itertuples(index=False), start=1):
        try:
            currencies.append(
                Currency(
                    code=str(row.code),
                    decimal_digits=_as_whole_number(row.decimal_digits, "decimal_digits"),
                    numeric_code=_as_whole_number(row.numeric_code, "numeric_code"),
                    symbol="" if pd.isna(row.symbol) else str(row.symbol),
                    name=str(row.name) if has_name and not pd.isna(row.name) else "",
                ),
            )
        except ValueError as e:
            raise CatalogError(f"Invalid currency data in row {row_number}: {e}") from e

    return CurrencyCatalog(currencies)


def load_catalog_csv(path: str | Path) -> CurrencyCatalog:
    """Load a `CurrencyCatalog` from a CSV file (see `catalog_from_dataframe` for columns).

    Codes and symbols are read as text so that values like "NaN" or "001" survive intact.

    Raises:
        CatalogError: If the file cannot be read or its content is invalid.
    """
    path = Path(path)
    try:
        df = pd.read_csv(path, dtype={"code": str, "symbol": str, "name": str}, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise CatalogError(f"Cannot load currency catalog from $path '{path}': {e}") from e

    catalog = catalog_from_dataframe(df)
    logger.info(f"Loaded {len(catalog)} currency(ies) from '{path}'")
    return catalog


def _as_whole_number(value, column: str) -> int:
    # pandas hands back numpy scalars (or floats when a column has blanks)
    if pd.isna(value) or isinstance(value, str) and not value.strip():
        raise ValueError(f"${column} is missing")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"${column} must be a whole number, but provided value is: '{value}'") from e
    if not number.is_integer():
        raise ValueError(f"${column} must be a whole number, but provided value is: {value}")
    return int(number)
