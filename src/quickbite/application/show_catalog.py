"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from quickbite.application.dto import CatalogItemDTO
from quickbite.application.price_display import PriceDisplay
from quickbite.domain.model.cart import CartLedger
from quickbite.domain.model.catalog import ALL_CATEGORIES, Catalog


class ShowCatalogHandler:

    def __init__(self, catalog: Catalog, cart: CartLedger, prices: PriceDisplay) -> None:
        self._catalog = catalog
        self._cart = cart
        self._prices = prices

    def handle(self, category: str = ALL_CATEGORIES, search: str = "") -> list[CatalogItemDTO]:
        return [
            CatalogItemDTO(
                id=item.id,
                name=item.name,
                category=item.category,
                description=item.description,
                price=self._prices.format(item.price),
                in_cart=self._cart.contains(item.id),
            )
            for item in self._catalog.filter(category, search)
        ]
