"""Domain service: Exchange Rate Provider.

Acquires the rate table used for display conversion. Acquisition is a
small state machine::

    FRESH                       cached snapshot young enough, reuse it
    STALE -> FETCHING -> FETCHED    one remote attempt succeeded, cache it
                      -> FELL_BACK  remote failed or disabled, static table

A fallback table is never written to the cache, and no failure is ever
raised to the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable

from quickbite.domain.exceptions import RateSourceError, ValidationError
from quickbite.domain.model.rates import (
    DEFAULT_TTL,
    SUPPORTED_CURRENCIES,
    RateSnapshot,
    fallback_rates,
    fallback_snapshot,
)
from quickbite.domain.model.value_objects import BASE_CURRENCY
from quickbite.domain.repository.rate_cache import ExchangeRateCache
from quickbite.domain.repository.rate_source import RateSource

logger = logging.getLogger(__name__)


class RateAcquisition(Enum):
    FRESH = "FRESH"
    STALE = "STALE"
    FETCHING = "FETCHING"
    FETCHED = "FETCHED"
    FELL_BACK = "FELL_BACK"


_TRANSITIONS: dict[RateAcquisition | None, set[RateAcquisition]] = {
    None: {RateAcquisition.FRESH, RateAcquisition.STALE},
    RateAcquisition.STALE: {RateAcquisition.FETCHING},
    RateAcquisition.FETCHING: {RateAcquisition.FETCHED, RateAcquisition.FELL_BACK},
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExchangeRateProvider:

    def __init__(
        self,
        cache: ExchangeRateCache,
        source: RateSource | None,
        *,
        base_currency: str = BASE_CURRENCY,
        currencies: tuple[str, ...] = SUPPORTED_CURRENCIES,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._cache = cache
        self._source = source
        self._base_currency = base_currency
        self._currencies = currencies
        self._ttl = ttl
        self._clock = clock
        self._snapshot: RateSnapshot | None = None
        self.state: RateAcquisition | None = None

    # --- Public API -----------------------------------------------------------

    def current_rates(self) -> RateSnapshot:
        """Return the rate table for this session.

        The first call runs the acquisition; later calls return the same
        snapshot without touching cache or network again.
        """
        if self._snapshot is None:
            self._snapshot = self._acquire()
        return self._snapshot

    @property
    def used_fallback(self) -> bool:
        return self.state is RateAcquisition.FELL_BACK

    # --- State machine --------------------------------------------------------

    def _acquire(self) -> RateSnapshot:
        self.state = None
        now = self._clock()
        cached = self._cache.load()

        if self._is_usable(cached, now):
            self._enter(RateAcquisition.FRESH)
            return self._complete(cached)  # type: ignore[arg-type]

        self._enter(RateAcquisition.STALE)
        self._enter(RateAcquisition.FETCHING)
        fetched = self._fetch(now)
        if fetched is None:
            self._enter(RateAcquisition.FELL_BACK)
            return fallback_snapshot(now, self._base_currency)

        self._enter(RateAcquisition.FETCHED)
        self._cache.save(fetched)
        logger.info(
            "Cached fresh exchange rates for %s (%s)",
            self._base_currency,
            ", ".join(sorted(fetched.rates)),
        )
        return self._complete(fetched)

    def _enter(self, state: RateAcquisition) -> None:
        allowed = _TRANSITIONS.get(self.state, set())
        if state not in allowed:
            raise RuntimeError(f"Illegal rate acquisition transition {self.state} -> {state}")
        logger.debug("Rate acquisition: %s -> %s", self.state, state.value)
        self.state = state

    def _is_usable(self, cached: RateSnapshot | None, now: datetime) -> bool:
        if cached is None:
            return False
        if cached.base_currency != self._base_currency:
            return False
        return cached.is_fresh(now, self._ttl)

    def _fetch(self, now: datetime) -> RateSnapshot | None:
        if self._source is None:
            logger.warning("Remote exchange rates disabled; using static fallback table")
            return None
        try:
            table = self._source.fetch(self._base_currency)
            kept = {
                code.upper(): rate
                for code, rate in table.items()
                if code.upper() in self._currencies
            }
            return RateSnapshot(now, self._base_currency, kept)
        except (RateSourceError, ValidationError) as exc:
            logger.warning("Exchange rate fetch failed (%s); using static fallback table", exc)
            return None

    def _complete(self, snapshot: RateSnapshot) -> RateSnapshot:
        # A partial table is still fresh; gaps come from the static table.
        missing = snapshot.missing(self._currencies)
        if missing:
            logger.debug("Filling %s from fallback rates", ", ".join(missing))
        return snapshot.filled_from(fallback_rates(self._base_currency), self._currencies)
