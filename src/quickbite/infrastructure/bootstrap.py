"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from quickbite.application.price_display import PriceDisplay
from quickbite.domain.model.cart import CartLedger
from quickbite.domain.model.catalog import Catalog, default_catalog
from quickbite.domain.model.coupon import CouponPolicy
from quickbite.domain.repository.account_repository import AccountRepository
from quickbite.domain.repository.key_value_store import KeyValueStore
from quickbite.domain.repository.preferences_repository import PreferencesRepository
from quickbite.domain.service.exchange_rate_provider import ExchangeRateProvider
from quickbite.domain.service.pricing_engine import PricingEngine
from quickbite.infrastructure.config import Settings, load_settings
from quickbite.infrastructure.http.http_rate_source import HttpRateSource
from quickbite.infrastructure.persistence.json_key_value_store import JsonFileKeyValueStore
from quickbite.infrastructure.persistence.kv_account_repository import KeyValueAccountRepository
from quickbite.infrastructure.persistence.kv_cart_repository import KeyValueCartRepository
from quickbite.infrastructure.persistence.kv_preferences_repository import (
    KeyValuePreferencesRepository,
)
from quickbite.infrastructure.persistence.kv_rate_cache import KeyValueExchangeRateCache


@dataclass
class Storefront:
    """Everything one shopping session needs, owned in one place.

    Passed by handle to whoever renders it; there is no module-level
    cart or currency.
    """

    catalog: Catalog
    cart: CartLedger
    coupons: CouponPolicy
    engine: PricingEngine
    preferences: PreferencesRepository
    accounts: AccountRepository
    rate_provider: ExchangeRateProvider
    prices: PriceDisplay


def key_value_store(settings: Settings) -> JsonFileKeyValueStore:
    return JsonFileKeyValueStore(settings.store_path)


def build_storefront(
    settings: Settings,
    store: KeyValueStore,
    rate_provider: ExchangeRateProvider | None = None,
    catalog: Catalog | None = None,
) -> Storefront:
    catalog = catalog or default_catalog()
    coupons = CouponPolicy()
    engine = PricingEngine(settings.pricing, coupons, settings.base_currency)
    preferences = KeyValuePreferencesRepository(store, settings.default_currency)
    if rate_provider is None:
        source = (
            HttpRateSource(settings.rates_url, timeout=settings.http_timeout)
            if settings.remote_rates_enabled
            else None
        )
        rate_provider = ExchangeRateProvider(
            KeyValueExchangeRateCache(store),
            source,
            base_currency=settings.base_currency,
            ttl=settings.rates_ttl,
        )
    return Storefront(
        catalog=catalog,
        cart=CartLedger(catalog, KeyValueCartRepository(store)),
        coupons=coupons,
        engine=engine,
        preferences=preferences,
        accounts=KeyValueAccountRepository(store),
        rate_provider=rate_provider,
        prices=PriceDisplay(engine, rate_provider, preferences),
    )


def storefront() -> Storefront:
    settings = load_settings()
    return build_storefront(settings, key_value_store(settings))
