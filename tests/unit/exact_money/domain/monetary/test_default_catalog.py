import pytest

from exact_money.config import ENV_CATALOG_CSV, ENV_CATALOG_MODE
from exact_money.domain.monetary.default_catalog import default_catalog, reset_default_catalog
from exact_money.domain.monetary.money import Money
from exact_money.errors import UnknownCurrencyError

CSV_CONTENT = "code,decimal_digits,numeric_code,symbol,name\nXTS,1,963,T,Testing Code\nEUR,3,978,€,Euro\n"


@pytest.fixture
def configured_env(monkeypatch, tmp_path):
    # Run from an empty directory so no stray .env file is picked up
    monkeypatch.chdir(tmp_path)
    for name in (ENV_CATALOG_CSV, ENV_CATALOG_MODE):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "currencies.csv"
    path.write_text(CSV_CONTENT, encoding="utf-8")
    reset_default_catalog()
    yield monkeypatch, path
    reset_default_catalog()


def test_default_catalog_is_cached(configured_env):
    assert default_catalog() is default_catalog()
    assert "EUR" in default_catalog()


def test_default_catalog_merges_csv(configured_env):
    monkeypatch, path = configured_env
    monkeypatch.setenv(ENV_CATALOG_CSV, str(path))

    catalog = default_catalog()

    assert catalog.lookup("XTS").decimal_digits == 1
    assert catalog.lookup("EUR").decimal_digits == 3
    assert "USD" in catalog
    assert Money.from_decimal("1.5", "XTS").amount == 15


def test_default_catalog_replaces_with_csv(configured_env):
    monkeypatch, path = configured_env
    monkeypatch.setenv(ENV_CATALOG_CSV, str(path))
    monkeypatch.setenv(ENV_CATALOG_MODE, "replace")

    assert default_catalog().codes() == ["EUR", "XTS"]
    with pytest.raises(UnknownCurrencyError):
        Money(100, "USD")
