"""CartLedger aggregate — the shopper's line items.

The ledger is the sole owner of its lines. Every mutation is written
back through the repository before the method returns, so any other
reader of the store sees it immediately.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from quickbite.domain.model.catalog import Catalog
from quickbite.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from quickbite.domain.repository.cart_repository import CartRepository


@dataclass(frozen=True)
class CartLine:
    """One catalog item and how many of it are in the cart."""

    item_id: int
    quantity: Quantity


class CartLedger:
    """Aggregate root for the cart.

    Invariants:
    - at most one CartLine per item id
    - every line has a quantity >= 1
    - lines keep the order in which items were first added
    """

    def __init__(self, catalog: Catalog, repository: CartRepository) -> None:
        self._catalog = catalog
        self._repository = repository
        self._lines: list[CartLine] = []
        for line in repository.load():
            if line.item_id in catalog and not self.contains(line.item_id):
                self._lines.append(line)

    # --- Commands -------------------------------------------------------------

    def add(self, item_id: int) -> bool:
        """Put one of *item_id* in the cart.

        Returns False (and changes nothing) if the item is already there.
        Raises EntityNotFoundError for an item missing from the catalog.
        """
        self._catalog.require(item_id)
        if self.contains(item_id):
            return False
        self._lines.append(CartLine(item_id, Quantity(1)))
        self._persist()
        return True

    def set_quantity(self, item_id: int, quantity: int) -> bool:
        """Change a line's quantity; anything below one removes the line.

        Returns False, and changes nothing, when the item is not in the cart.
        """
        if quantity < 1:
            return self.remove(item_id)
        index = self._index_of(item_id)
        if index is None:
            return False
        self._lines[index] = CartLine(item_id, Quantity(quantity))
        self._persist()
        return True

    def remove(self, item_id: int) -> bool:
        index = self._index_of(item_id)
        if index is None:
            return False
        del self._lines[index]
        self._persist()
        return True

    def clear(self) -> None:
        self._lines = []
        self._persist()

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def contains(self, item_id: int) -> bool:
        return self._index_of(item_id) is not None

    def quantity_of(self, item_id: int) -> int:
        index = self._index_of(item_id)
        return 0 if index is None else self._lines[index].quantity.value

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def line_total(self, line: CartLine) -> Money:
        return self._catalog.require(line.item_id).price * line.quantity.value

    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + self.line_total(line)
        return result

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, item_id: int) -> int | None:
        for i, line in enumerate(self._lines):
            if line.item_id == item_id:
                return i
        return None

    def _persist(self) -> None:
        self._repository.save(list(self._lines))
