from pathlib import Path

import pandas as pd
import pytest

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_catalog import CurrencyCatalog, catalog_from_dataframe, load_catalog_csv
from exact_money.domain.monetary.currency_registry import EUR, USD, builtin_catalog
from exact_money.errors import CatalogError, UnknownCurrencyError

# CSV file used in this test module
CSV_PATH = Path(__file__).with_name("test_currencies.csv")


def test_lookup():
    catalog = CurrencyCatalog([EUR, USD])

    assert catalog.lookup("EUR") is EUR
    assert catalog.lookup(" usd ") is USD
    assert catalog.lookup("GBP") is None
    assert catalog.lookup(None) is None


def test_get_unknown_currency():
    catalog = CurrencyCatalog([EUR])

    with pytest.raises(UnknownCurrencyError, match="GBP"):
        catalog.get("GBP")


def test_resolve_currency_object_by_code():
    catalog = CurrencyCatalog([EUR])

    assert catalog.resolve(Currency("EUR", 0, 0, "")) is EUR
    with pytest.raises(UnknownCurrencyError):
        catalog.resolve(USD)


def test_container_protocol():
    catalog = CurrencyCatalog([EUR, USD])

    assert "eur" in catalog
    assert "GBP" not in catalog
    assert len(catalog) == 2
    assert set(catalog) == {EUR, USD}
    assert catalog.codes() == ["EUR", "USD"]


def test_duplicate_codes_are_rejected():
    with pytest.raises(CatalogError):
        CurrencyCatalog([EUR, Currency("EUR", 3, 978, "€")])


def test_non_currency_items_are_rejected():
    with pytest.raises(CatalogError):
        CurrencyCatalog([EUR, "USD"])


def test_merged_returns_new_catalog():
    catalog = CurrencyCatalog([EUR, USD])
    override = Currency("USD", 4, 840, "$", "Precise Dollar")

    merged = catalog.merged([override, Currency("XTS", 2, 963, "")])

    assert merged.lookup("USD").decimal_digits == 4
    assert "XTS" in merged
    # original is untouched
    assert catalog.lookup("USD") is USD
    assert "XTS" not in catalog


def test_catalog_from_dataframe():
    df = pd.DataFrame(
        {
            "code": ["EUR", "KWD"],
            "decimal_digits": [2, 3],
            "numeric_code": [978, 414],
            "symbol": ["€", "KD"],
        },
    )

    catalog = catalog_from_dataframe(df)

    assert catalog.lookup("KWD").decimal_digits == 3
    assert catalog.lookup("KWD").name == "KWD"


def test_catalog_from_dataframe_missing_columns():
    df = pd.DataFrame({"code": ["EUR"], "decimal_digits": [2]})

    with pytest.raises(CatalogError, match="numeric_code"):
        catalog_from_dataframe(df)


def test_catalog_from_dataframe_invalid_rows():
    df = pd.DataFrame({"code": ["EUR"], "decimal_digits": [2.5], "numeric_code": [978], "symbol": ["€"]})

    with pytest.raises(CatalogError, match="row 1"):
        catalog_from_dataframe(df)


def test_catalog_from_dataframe_requires_dataframe():
    with pytest.raises(CatalogError):
        catalog_from_dataframe([{"code": "EUR"}])


def test_load_catalog_csv():
    catalog = load_catalog_csv(CSV_PATH)

    assert catalog.codes() == ["BHD", "JPY", "XTS"]
    assert catalog.lookup("XTS").decimal_digits == 1
    assert catalog.lookup("XTS").name == "Testing Code"
    assert catalog.lookup("JPY").symbol == "¥"
    assert catalog.lookup("BHD").numeric_code == 48


def test_load_catalog_csv_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog_csv(tmp_path / "missing.csv")


def test_load_catalog_csv_blank_digits(tmp_path):
    path = tmp_path / "currencies.csv"
    path.write_text("code,decimal_digits,numeric_code,symbol\nEUR,,978,€\n", encoding="utf-8")

    with pytest.raises(CatalogError):
        load_catalog_csv(path)


def test_builtin_catalog_contains_iso_currencies():
    catalog = builtin_catalog()

    for code in ("USD", "EUR", "GBP", "JPY", "BHD", "KWD", "CLF"):
        assert code in catalog
