"""Abstract cache for the most recent remotely-fetched rate snapshot."""

from __future__ import annotations

from abc import ABC, abstractmethod

from quickbite.domain.model.rates import RateSnapshot


class ExchangeRateCache(ABC):

    @abstractmethod
    def load(self) -> RateSnapshot | None:
        """Return the cached snapshot, or None if absent or unreadable."""

    @abstractmethod
    def save(self, snapshot: RateSnapshot) -> None:
        """Overwrite the cached snapshot."""
