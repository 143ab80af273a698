"""Abstract repository for the persisted cart.

Defined in the domain layer so the domain never depends on
infrastructure. The key-value implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from quickbite.domain.model.cart import CartLine


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[CartLine]:
        """Return the stored lines in insertion order, or ``[]`` if none are readable."""

    @abstractmethod
    def save(self, lines: list[CartLine]) -> None:
        """Persist the full ledger, replacing whatever was stored."""
