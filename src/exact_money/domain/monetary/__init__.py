"""Monetary domain package.

This package contains the exact `Money` value type (whole minor units), `Currency`
metadata, the read-only `CurrencyCatalog`, the built-in ISO 4217 table, and the
proportional allocation algorithm.
"""

from exact_money.domain.monetary.allocation import RemainderPolicy, allocate_minor_units
from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_catalog import CurrencyCatalog, catalog_from_dataframe, load_catalog_csv
from exact_money.domain.monetary.default_catalog import default_catalog, reset_default_catalog
from exact_money.domain.monetary.money import Money

__all__ = [
    "RemainderPolicy",
    "allocate_minor_units",
    "Currency",
    "CurrencyCatalog",
    "catalog_from_dataframe",
    "load_catalog_csv",
    "default_catalog",
    "reset_default_catalog",
    "Money",
]
