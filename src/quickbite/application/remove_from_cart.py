"""Application service: Remove From Cart use case."""

from __future__ import annotations

from quickbite.domain.model.cart import CartLedger


class RemoveFromCartHandler:

    def __init__(self, cart: CartLedger) -> None:
        self._cart = cart

    def handle(self, item_id: int) -> bool:
        return self._cart.remove(item_id)
