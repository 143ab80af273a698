"""Application service: Update Cart Quantity use case."""

from __future__ import annotations

from quickbite.domain.model.cart import CartLedger


class UpdateCartQuantityHandler:

    def __init__(self, cart: CartLedger) -> None:
        self._cart = cart

    def handle(self, item_id: int, quantity: int) -> int | None:
        """Set the quantity of a cart line and return what it ended up as.

        A quantity below one removes the line (returns 0). A line that is
        not in the cart is left alone and None is returned.
        """
        if not self._cart.set_quantity(item_id, quantity):
            return None
        return self._cart.quantity_of(item_id)
