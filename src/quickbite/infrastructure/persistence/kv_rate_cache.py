"""Key-value implementation of ExchangeRateCache."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from quickbite.domain.exceptions import ValidationError
from quickbite.domain.model.rates import RateSnapshot
from quickbite.domain.repository.key_value_store import KeyValueStore, StorageKeys
from quickbite.domain.repository.rate_cache import ExchangeRateCache
from quickbite.infrastructure.persistence.codecs import (
    SCHEMA_VERSION,
    DecodeError,
    read_json,
    report,
    versioned,
    write_json,
)


class KeyValueExchangeRateCache(ExchangeRateCache):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load(self) -> RateSnapshot | None:
        payload = read_json(self._store, StorageKeys.RATES)
        if payload is None:
            return None
        try:
            return self._to_domain(versioned(payload))
        except (DecodeError, ValidationError, InvalidOperation, KeyError, TypeError, ValueError) as exc:
            report(StorageKeys.RATES, exc)
            return None

    def save(self, snapshot: RateSnapshot) -> None:
        write_json(self._store, StorageKeys.RATES, self._to_raw(snapshot))

    @staticmethod
    def _to_raw(snapshot: RateSnapshot) -> dict:
        return {
            "v": SCHEMA_VERSION,
            "captured_at": snapshot.captured_at.isoformat(),
            "base": snapshot.base_currency,
            "rates": {code: str(rate) for code, rate in snapshot.rates.items()},
        }

    @staticmethod
    def _to_domain(raw: dict) -> RateSnapshot:
        captured_at = datetime.fromisoformat(raw["captured_at"])
        if captured_at.tzinfo is None:
            captured_at = captured_at.replace(tzinfo=timezone.utc)
        rates = raw["rates"]
        if not isinstance(rates, dict):
            raise DecodeError("rates must be an object")
        return RateSnapshot(
            captured_at=captured_at,
            base_currency=str(raw["base"]),
            rates={code: Decimal(str(value)) for code, value in rates.items()},
        )
