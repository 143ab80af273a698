"""Shared last-mile conversion of base-currency amounts for display."""

from __future__ import annotations

from quickbite.application.dto import TotalsDTO
from quickbite.domain.model.value_objects import Money
from quickbite.domain.repository.preferences_repository import PreferencesRepository
from quickbite.domain.service.exchange_rate_provider import ExchangeRateProvider
from quickbite.domain.service.pricing_engine import PricingEngine, Totals


class PriceDisplay:
    """Formats Money in whatever currency the shopper has selected.

    The selected currency is re-read on every call, so a switch is
    visible immediately and never touches the base-currency values.
    """

    def __init__(
        self,
        engine: PricingEngine,
        rate_provider: ExchangeRateProvider,
        preferences: PreferencesRepository,
    ) -> None:
        self._engine = engine
        self._rate_provider = rate_provider
        self._preferences = preferences

    @property
    def currency(self) -> str:
        return self._preferences.get_currency()

    @property
    def using_fallback(self) -> bool:
        self._rate_provider.current_rates()
        return self._rate_provider.used_fallback

    def format(self, amount: Money) -> str:
        rates = self._rate_provider.current_rates().rates
        return self._engine.display(amount, self.currency, rates)

    def totals(self, totals: Totals) -> TotalsDTO:
        return TotalsDTO(
            subtotal=self.format(totals.subtotal),
            tax=self.format(totals.tax),
            delivery=self.format(totals.delivery),
            discount=self.format(totals.discount),
            total=self.format(totals.total),
            coupon=totals.coupon.code if totals.coupon else None,
        )
