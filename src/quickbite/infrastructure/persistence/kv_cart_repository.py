"""Key-value implementation of CartRepository."""

from __future__ import annotations

from quickbite.domain.exceptions import ValidationError
from quickbite.domain.model.cart import CartLine
from quickbite.domain.model.value_objects import Quantity
from quickbite.domain.repository.cart_repository import CartRepository
from quickbite.domain.repository.key_value_store import KeyValueStore, StorageKeys
from quickbite.infrastructure.persistence.codecs import (
    SCHEMA_VERSION,
    DecodeError,
    read_json,
    report,
    versioned,
    write_json,
)


class KeyValueCartRepository(CartRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[CartLine]:
        payload = read_json(self._store, StorageKeys.CART)
        if payload is None:
            return []
        try:
            return self._to_domain(payload)
        except (DecodeError, ValidationError, KeyError, TypeError) as exc:
            report(StorageKeys.CART, exc)
            return []

    def save(self, lines: list[CartLine]) -> None:
        write_json(self._store, StorageKeys.CART, self._to_raw(lines))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(lines: list[CartLine]) -> dict:
        return {
            "v": SCHEMA_VERSION,
            "lines": [
                {"item_id": line.item_id, "quantity": line.quantity.value}
                for line in lines
            ],
        }

    @staticmethod
    def _to_domain(payload: object) -> list[CartLine]:
        # Unversioned list: the original browser format, whole item + quantity.
        if isinstance(payload, list):
            raw_lines = [{"item_id": r["id"], "quantity": r["quantity"]} for r in payload]
        else:
            raw_lines = versioned(payload)["lines"]
            if not isinstance(raw_lines, list):
                raise DecodeError("lines must be a list")

        lines: list[CartLine] = []
        seen: set[int] = set()
        for raw in raw_lines:
            item_id = raw["item_id"]
            if isinstance(item_id, bool) or not isinstance(item_id, int):
                raise DecodeError(f"bad item id {item_id!r}")
            if item_id in seen:
                continue
            seen.add(item_id)
            lines.append(CartLine(item_id=item_id, quantity=Quantity(raw["quantity"])))
        return lines
