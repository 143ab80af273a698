"""Application service: Show Cart use case (query).

Prices the cart in the base currency, then hands every amount to the
display layer for conversion into the selected currency.
"""

from __future__ import annotations

from quickbite.application.dto import CartDTO, CartLineDTO
from quickbite.application.price_display import PriceDisplay
from quickbite.domain.model.cart import CartLedger
from quickbite.domain.model.catalog import Catalog
from quickbite.domain.repository.preferences_repository import PreferencesRepository
from quickbite.domain.service.pricing_engine import PricingEngine, Totals


class ShowCartHandler:

    def __init__(
        self,
        catalog: Catalog,
        cart: CartLedger,
        engine: PricingEngine,
        preferences: PreferencesRepository,
        prices: PriceDisplay,
    ) -> None:
        self._catalog = catalog
        self._cart = cart
        self._engine = engine
        self._preferences = preferences
        self._prices = prices

    def totals(self) -> Totals:
        """Authoritative base-currency totals for the current cart."""
        return self._engine.compute_totals(self._cart, self._preferences.get_coupon())

    def handle(self) -> CartDTO:
        lines = []
        for line in self._cart.snapshot():
            item = self._catalog.require(line.item_id)
            lines.append(
                CartLineDTO(
                    item_id=item.id,
                    name=item.name,
                    quantity=line.quantity.value,
                    unit_price=self._prices.format(item.price),
                    line_total=self._prices.format(self._cart.line_total(line)),
                )
            )
        return CartDTO(
            currency=self._prices.currency,
            lines=lines,
            item_count=self._cart.item_count,
            totals=self._prices.totals(self.totals()),
            fallback_rates=self._prices.using_fallback,
        )
