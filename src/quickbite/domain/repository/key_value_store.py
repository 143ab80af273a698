"""Abstract durable key -> string store.

Every other persisted component sits on top of this. Implementations
must survive process restarts; no logic beyond storage lives here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StorageKeys:
    """Logical key names. Each key has exactly one writer."""

    USER = "qb_user"
    CART = "qb_cart"
    ADDRESSES = "qb_addresses"
    SELECTED_ADDRESS = "qb_addr_selected"
    CURRENCY = "qb_currency"
    COUPON = "qb_coupon"
    RATES = "qb_rates"


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*; a missing key is not an error."""
