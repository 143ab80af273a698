"""Abstract repository for the shopper's display currency and coupon."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PreferencesRepository(ABC):

    @abstractmethod
    def get_currency(self) -> str:
        """Return the selected display currency, or the configured default."""

    @abstractmethod
    def set_currency(self, currency: str) -> None:
        """Persist the selected display currency."""

    @abstractmethod
    def get_coupon(self) -> str | None:
        """Return the active coupon code, or None."""

    @abstractmethod
    def set_coupon(self, code: str | None) -> None:
        """Replace the active coupon; None clears it."""
