"""Abstract remote source of exchange rates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class RateSource(ABC):

    @abstractmethod
    def fetch(self, base_currency: str) -> dict[str, Decimal]:
        """Fetch one rate table denominated in *base_currency*.

        Makes a single attempt. Raises RateSourceError on any failure.
        """
