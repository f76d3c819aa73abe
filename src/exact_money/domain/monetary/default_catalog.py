from __future__ import annotations

import logging
from functools import lru_cache

from exact_money.config import CatalogMode, load_settings
from exact_money.domain.monetary.currency_catalog import CurrencyCatalog, load_catalog_csv
from exact_money.domain.monetary.currency_registry import builtin_catalog

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_catalog() -> CurrencyCatalog:
    """Return the process-wide catalog used when no $catalog is passed to `Money`.

    Built once on first use from the built-in ISO table, optionally combined with the CSV
    named in $EXACT_MONEY_CATALOG_CSV (see `exact_money.config`). Never mutated afterwards.
    """
    settings = load_settings()
    catalog = builtin_catalog()

    if settings.catalog_csv_path is not None:
        loaded = load_catalog_csv(settings.catalog_csv_path)
        if settings.catalog_mode is CatalogMode.REPLACE:
            catalog = loaded
        else:
            catalog = catalog.merged(loaded)

    logger.info(f"Default currency catalog ready with {len(catalog)} currency(ies)")
    return catalog


def reset_default_catalog() -> None:
    """Forget the cached default catalog; the next `default_catalog()` call rebuilds it.

    Intended for tests and for applications that change settings before first real use.
    """
    default_catalog.cache_clear()
