"""Abstract repository for the logged-in user and saved addresses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from quickbite.domain.model.account import Address, User


class AccountRepository(ABC):

    @abstractmethod
    def get_user(self) -> User | None:
        """Return the logged-in user, or None."""

    @abstractmethod
    def set_user(self, user: User | None) -> None:
        """Log *user* in; None logs out."""

    @abstractmethod
    def list_addresses(self) -> list[Address]:
        """Return saved addresses in the order they were added."""

    @abstractmethod
    def add_address(self, address: Address) -> None:
        """Append a new address."""

    @abstractmethod
    def get_selected_address_id(self) -> str | None:
        """Return the id of the selected delivery address, or None."""

    @abstractmethod
    def set_selected_address_id(self, address_id: str) -> None:
        """Select a delivery address by id."""
