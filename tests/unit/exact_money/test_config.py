import os
from pathlib import Path

import pytest

from exact_money.config import ENV_CATALOG_CSV, ENV_CATALOG_MODE, CatalogMode, MoneySettings, load_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (ENV_CATALOG_CSV, ENV_CATALOG_MODE):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings(use_dotenv=False)

    assert settings == MoneySettings()
    assert settings.catalog_csv_path is None
    assert settings.catalog_mode is CatalogMode.MERGE


def test_reads_environment(clean_env):
    clean_env.setenv(ENV_CATALOG_CSV, "/data/currencies.csv")
    clean_env.setenv(ENV_CATALOG_MODE, "Replace")

    settings = load_settings(use_dotenv=False)

    assert settings.catalog_csv_path == Path("/data/currencies.csv")
    assert settings.catalog_mode is CatalogMode.REPLACE


def test_invalid_mode(clean_env):
    clean_env.setenv(ENV_CATALOG_MODE, "append")

    with pytest.raises(ValueError, match=ENV_CATALOG_MODE):
        load_settings(use_dotenv=False)


def test_reads_dotenv_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text(f"{ENV_CATALOG_CSV}=extra.csv\n", encoding="utf-8")
    clean_env.chdir(tmp_path)

    settings = load_settings()

    assert settings.catalog_csv_path == Path("extra.csv")


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        MoneySettings().catalog_mode = CatalogMode.REPLACE


def test_empty_mode_falls_back_to_merge(clean_env):
    clean_env.setenv(ENV_CATALOG_MODE, "  ")

    assert load_settings(use_dotenv=False).catalog_mode is CatalogMode.MERGE


def test_dotenv_file_does_not_leak_into_process_environment(clean_env, tmp_path):
    (tmp_path / ".env").write_text(f"{ENV_CATALOG_MODE}=replace\n", encoding="utf-8")
    clean_env.chdir(tmp_path)

    settings = load_settings()

    assert settings.catalog_mode is CatalogMode.REPLACE
    assert ENV_CATALOG_MODE not in os.environ


def test_environment_wins_over_dotenv_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text(f"{ENV_CATALOG_MODE}=replace\n", encoding="utf-8")
    clean_env.chdir(tmp_path)
    clean_env.setenv(ENV_CATALOG_MODE, "merge")

    assert load_settings().catalog_mode is CatalogMode.MERGE
