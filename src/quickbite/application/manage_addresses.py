"""Application services: Save, Select and List delivery addresses."""

from __future__ import annotations

import time
from typing import Callable

from quickbite.application.dto import AddressDTO
from quickbite.domain.exceptions import EntityNotFoundError
from quickbite.domain.model.account import Address
from quickbite.domain.repository.account_repository import AccountRepository


def _timestamp_id() -> str:
    return str(int(time.time() * 1000))


class SaveAddressHandler:

    def __init__(
        self,
        account_repo: AccountRepository,
        id_factory: Callable[[], str] = _timestamp_id,
    ) -> None:
        self._account_repo = account_repo
        self._id_factory = id_factory

    def handle(self, **fields: object) -> Address:
        """Validate and store a new address, then select it."""
        existing = {a.id for a in self._account_repo.list_addresses()}
        address_id = self._id_factory()
        while address_id in existing:
            address_id = str(int(address_id) + 1) if address_id.isdigit() else address_id + "_"
        address = Address.create(address_id, **fields)
        self._account_repo.add_address(address)
        self._account_repo.set_selected_address_id(address.id)
        return address


class SelectAddressHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self, address_id: str) -> Address:
        for address in self._account_repo.list_addresses():
            if address.id == address_id:
                self._account_repo.set_selected_address_id(address.id)
                return address
        raise EntityNotFoundError(f"Address '{address_id}' not found")


class ListAddressesHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self) -> list[AddressDTO]:
        selected = self._account_repo.get_selected_address_id()
        return [
            AddressDTO(
                id=a.id,
                label=a.label,
                full_name=a.full_name,
                phone=a.phone,
                summary=a.one_line(),
                selected=a.id == selected,
            )
            for a in self._account_repo.list_addresses()
        ]
