"""Application service: Add To Cart use case."""

from __future__ import annotations

from quickbite.domain.model.cart import CartLedger
from quickbite.domain.model.catalog import Catalog


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: CartLedger) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, item_id: int) -> str:
        """Add one unit of *item_id*; returns a message for the shopper.

        Adding an item that is already in the cart changes nothing.
        Raises EntityNotFoundError for an unknown item.
        """
        item = self._catalog.require(item_id)
        if self._cart.add(item_id):
            return f"{item.name} added to cart!"
        return f"{item.name} is already in your cart."
