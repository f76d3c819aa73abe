from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

# Environment variables (may also come from a .env file)
ENV_CATALOG_CSV = "EXACT_MONEY_CATALOG_CSV"
ENV_CATALOG_MODE = "EXACT_MONEY_CATALOG_MODE"


class CatalogMode(Enum):
    """How a configured catalog CSV combines with the built-in ISO table."""

    MERGE = "merge"
    REPLACE = "replace"


@dataclass(frozen=True)
class MoneySettings:
    """Process-level settings for exact_money.

    Attributes:
        catalog_csv_path (Path | None): CSV file with extra currencies, or None for built-ins only.
        catalog_mode (CatalogMode): MERGE adds/overrides built-in entries; REPLACE uses only the CSV.
    """

    catalog_csv_path: Path | None = None
    catalog_mode: CatalogMode = CatalogMode.MERGE


def load_settings(use_dotenv: bool = True) -> MoneySettings:
    """Read `MoneySettings` from the environment.

    Args:
        use_dotenv: When True, values from a `.env` file (searched from the current working
            directory upward) are read too. Variables already set in the environment win, and
            `os.environ` itself is never modified.

    Raises:
        ValueError: If $EXACT_MONEY_CATALOG_MODE holds an unknown mode.
    """
    environ: dict[str, str | None] = {}
    if use_dotenv:
        # Search from the working directory of the application, not from this package
        environ.update(dotenv_values(find_dotenv(usecwd=True)))
    environ.update(os.environ)

    # A `.env` key without a value reads as None
    raw_path = (environ.get(ENV_CATALOG_CSV) or "").strip()
    raw_mode = (environ.get(ENV_CATALOG_MODE) or "").strip().lower() or CatalogMode.MERGE.value

    try:
        mode = CatalogMode(raw_mode)
    except ValueError as e:
        allowed = [m.value for m in CatalogMode]
        raise ValueError(f"${ENV_CATALOG_MODE} must be one of {allowed}, but provided value is: '{raw_mode}'") from e

    settings = MoneySettings(catalog_csv_path=Path(raw_path) if raw_path else None, catalog_mode=mode)
    logger.debug(f"Loaded settings: {settings}")
    return settings
