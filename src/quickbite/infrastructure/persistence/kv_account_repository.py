"""Key-value implementation of AccountRepository."""

from __future__ import annotations

from quickbite.domain.model.account import Address, User
from quickbite.domain.repository.account_repository import AccountRepository
from quickbite.domain.repository.key_value_store import KeyValueStore, StorageKeys
from quickbite.infrastructure.persistence.codecs import DecodeError, read_json, report, write_json


class KeyValueAccountRepository(AccountRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- User -----------------------------------------------------------------

    def get_user(self) -> User | None:
        raw = read_json(self._store, StorageKeys.USER)
        if raw is None:
            return None
        try:
            if not isinstance(raw, dict):
                raise DecodeError("expected an object")
            return User(name=str(raw["name"]), email=str(raw["email"]), phone=str(raw.get("phone") or ""))
        except (DecodeError, KeyError) as exc:
            report(StorageKeys.USER, exc)
            return None

    def set_user(self, user: User | None) -> None:
        if user is None:
            self._store.remove(StorageKeys.USER)
            return
        write_json(self._store, StorageKeys.USER, {
            "name": user.name,
            "email": user.email,
            "phone": user.phone,
        })

    # --- Addresses ------------------------------------------------------------

    def list_addresses(self) -> list[Address]:
        raw = read_json(self._store, StorageKeys.ADDRESSES)
        if raw is None:
            return []
        try:
            if not isinstance(raw, list):
                raise DecodeError("expected a list")
            return [self._address_to_domain(item) for item in raw]
        except (DecodeError, KeyError, TypeError, ValueError) as exc:
            report(StorageKeys.ADDRESSES, exc)
            return []

    def add_address(self, address: Address) -> None:
        records = [self._address_to_raw(a) for a in self.list_addresses()]
        records.append(self._address_to_raw(address))
        write_json(self._store, StorageKeys.ADDRESSES, records)

    def get_selected_address_id(self) -> str | None:
        return self._store.get(StorageKeys.SELECTED_ADDRESS) or None

    def set_selected_address_id(self, address_id: str) -> None:
        self._store.set(StorageKeys.SELECTED_ADDRESS, address_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _address_to_raw(address: Address) -> dict:
        return {
            "id": address.id,
            "label": address.label,
            "fullName": address.full_name,
            "phone": address.phone,
            "line1": address.line1,
            "line2": address.line2,
            "city": address.city,
            "state": address.state,
            "pincode": address.pincode,
            "lat": address.lat,
            "lon": address.lon,
        }

    @staticmethod
    def _address_to_domain(raw: dict) -> Address:
        return Address(
            id=str(raw["id"]),
            label=str(raw.get("label") or "Home"),
            full_name=str(raw["fullName"]),
            phone=str(raw["phone"]),
            line1=str(raw["line1"]),
            line2=str(raw.get("line2") or ""),
            city=str(raw["city"]),
            state=str(raw["state"]),
            pincode=str(raw["pincode"]),
            lat=float(raw["lat"]) if raw.get("lat") is not None else None,
            lon=float(raw["lon"]) if raw.get("lon") is not None else None,
        )
