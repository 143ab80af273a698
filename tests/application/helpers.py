"""Shared wiring for application tests: a storefront on in-memory fakes."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from quickbite.domain.service.exchange_rate_provider import ExchangeRateProvider
from quickbite.domain.service.pricing_engine import PricingPolicy
from quickbite.infrastructure.bootstrap import Storefront, build_storefront
from quickbite.infrastructure.config import Settings
from quickbite.infrastructure.persistence.kv_rate_cache import KeyValueExchangeRateCache
from tests.fakes import FakeClock, FakeKeyValueStore, FakeRateSource


def make_settings(default_currency: str = "USD") -> Settings:
    return Settings(
        data_dir=Path("unused"),
        base_currency="USD",
        default_currency=default_currency,
        rates_url="",
        rates_ttl=timedelta(hours=12),
        http_timeout=None,
        pricing=PricingPolicy(),
    )


def make_storefront(
    store: FakeKeyValueStore | None = None,
    source: FakeRateSource | None = None,
    default_currency: str = "USD",
) -> tuple[Storefront, FakeKeyValueStore]:
    store = store if store is not None else FakeKeyValueStore()
    provider = ExchangeRateProvider(KeyValueExchangeRateCache(store), source, clock=FakeClock())
    front = build_storefront(make_settings(default_currency), store, rate_provider=provider)
    return front, store
