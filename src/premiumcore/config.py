"""
PremiumCore Configuration

Settings come from PC_* environment variables:

    PC_LOG_LEVEL      Log level for the 'premiumcore' logger (INFO)
    PC_CATALOG_PATH   YAML/JSON catalog replacing the built-in one (unset)
    PC_DOCS_ENABLED   Serve OpenAPI docs (true)
    PC_CURRENCY_MIN   Lower bound for currency validation (0)
    PC_CURRENCY_MAX   Upper bound for currency validation (1000000000)
    PC_DEFAULT_TERM   Term used when a selection gives none (20)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional

from .models import DEFAULT_TERM_YEARS
from .validation import CURRENCY_MAX, CURRENCY_MIN

ENGINE_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    catalog_path: Optional[str] = None
    docs_enabled: bool = True
    currency_min: Decimal = CURRENCY_MIN
    currency_max: Decimal = CURRENCY_MAX
    default_term: int = DEFAULT_TERM_YEARS
    engine_version: str = ENGINE_VERSION


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment (or the given mapping)."""
    env = os.environ if environ is None else environ
    return Settings(
        log_level=env.get("PC_LOG_LEVEL", "INFO").upper(),
        catalog_path=env.get("PC_CATALOG_PATH") or None,
        docs_enabled=env.get("PC_DOCS_ENABLED", "true").lower() == "true",
        currency_min=Decimal(env.get("PC_CURRENCY_MIN", str(CURRENCY_MIN))),
        currency_max=Decimal(env.get("PC_CURRENCY_MAX", str(CURRENCY_MAX))),
        default_term=int(env.get("PC_DEFAULT_TERM", str(DEFAULT_TERM_YEARS))),
        engine_version=env.get("PC_ENGINE_VERSION", ENGINE_VERSION),
    )
