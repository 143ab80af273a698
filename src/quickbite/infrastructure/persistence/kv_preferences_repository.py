"""Key-value implementation of PreferencesRepository."""

from __future__ import annotations

import logging

from quickbite.domain.model.coupon import normalize_code
from quickbite.domain.model.rates import SUPPORTED_CURRENCIES
from quickbite.domain.repository.key_value_store import KeyValueStore, StorageKeys
from quickbite.domain.repository.preferences_repository import PreferencesRepository

logger = logging.getLogger(__name__)


class KeyValuePreferencesRepository(PreferencesRepository):

    def __init__(
        self,
        store: KeyValueStore,
        default_currency: str = "INR",
        supported: tuple[str, ...] = SUPPORTED_CURRENCIES,
    ) -> None:
        self._store = store
        self._default_currency = default_currency
        self._supported = supported

    def get_currency(self) -> str:
        stored = self._store.get(StorageKeys.CURRENCY)
        if stored is None:
            return self._default_currency
        if stored.upper() not in self._supported:
            logger.warning("Ignoring unsupported stored currency %r", stored)
            return self._default_currency
        return stored.upper()

    def set_currency(self, currency: str) -> None:
        self._store.set(StorageKeys.CURRENCY, currency.upper())

    def get_coupon(self) -> str | None:
        return normalize_code(self._store.get(StorageKeys.COUPON)) or None

    def set_coupon(self, code: str | None) -> None:
        normalized = normalize_code(code)
        if normalized:
            self._store.set(StorageKeys.COUPON, normalized)
        else:
            self._store.remove(StorageKeys.COUPON)
