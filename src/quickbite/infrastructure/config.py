"""Application settings read from the environment (and an optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from quickbite.domain.exceptions import ConfigurationError
from quickbite.domain.model.rates import SUPPORTED_CURRENCIES
from quickbite.domain.model.value_objects import Money
from quickbite.domain.service.pricing_engine import PricingPolicy
from quickbite.infrastructure.http.http_rate_source import DEFAULT_RATES_URL

ROOT_DIR = Path(__file__).resolve().parents[3]
PREFIX = "QUICKBITE_"


def _get_env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(PREFIX + key)
    if v is not None and str(v).strip() != "":
        return v.strip()
    return default


def _get_decimal(key: str, default: str) -> Decimal:
    v = _get_env(key, default=default)
    try:
        return Decimal(v)  # type: ignore[arg-type]
    except InvalidOperation as exc:
        raise ConfigurationError(f"{PREFIX}{key} must be a number, got {v!r}") from exc


def _get_float(key: str) -> float | None:
    v = _get_env(key)
    if v is None:
        return None
    try:
        return float(v)
    except ValueError as exc:
        raise ConfigurationError(f"{PREFIX}{key} must be a number, got {v!r}") from exc


def _get_currency(key: str, default: str) -> str:
    v = (_get_env(key, default=default) or default).upper()
    if v not in SUPPORTED_CURRENCIES:
        raise ConfigurationError(
            f"{PREFIX}{key} must be one of {', '.join(SUPPORTED_CURRENCIES)}, got {v!r}"
        )
    return v


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    base_currency: str
    default_currency: str
    rates_url: str  # empty disables remote rates
    rates_ttl: timedelta
    http_timeout: float | None
    pricing: PricingPolicy

    @property
    def store_path(self) -> Path:
        return self.data_dir / "store.json"

    @property
    def remote_rates_enabled(self) -> bool:
        return bool(self.rates_url)


def load_settings() -> Settings:
    load_dotenv(dotenv_path=ROOT_DIR / ".env")

    rates_url = os.getenv(PREFIX + "RATES_URL")
    if rates_url is None:
        rates_url = DEFAULT_RATES_URL

    return Settings(
        data_dir=Path(_get_env("DATA_DIR", default=str(ROOT_DIR / "data"))),  # type: ignore[arg-type]
        base_currency=_get_currency("BASE_CURRENCY", "USD"),
        default_currency=_get_currency("DEFAULT_CURRENCY", "INR"),
        rates_url=rates_url.strip(),
        rates_ttl=timedelta(hours=float(_get_decimal("RATES_TTL_HOURS", "12"))),
        http_timeout=_get_float("HTTP_TIMEOUT"),
        pricing=PricingPolicy(
            tax_rate=_get_decimal("TAX_RATE", "0.05"),
            delivery_fee=Money(_get_decimal("DELIVERY_FEE", "2.50")),
            free_delivery_threshold=Money(_get_decimal("FREE_DELIVERY_THRESHOLD", "25")),
        ),
    )
