"""Application service: Select Currency use case, plus a rate query."""

from __future__ import annotations

from quickbite.application.dto import CurrencyDTO
from quickbite.domain.exceptions import ValidationError
from quickbite.domain.model.rates import SUPPORTED_CURRENCIES, rate_for
from quickbite.domain.repository.preferences_repository import PreferencesRepository
from quickbite.domain.service.exchange_rate_provider import ExchangeRateProvider, RateAcquisition

_SOURCES = {
    RateAcquisition.FRESH: "cache",
    RateAcquisition.FETCHED: "remote",
    RateAcquisition.FELL_BACK: "fallback",
}


class SelectCurrencyHandler:

    def __init__(
        self,
        preferences: PreferencesRepository,
        rate_provider: ExchangeRateProvider,
        supported: tuple[str, ...] = SUPPORTED_CURRENCIES,
    ) -> None:
        self._preferences = preferences
        self._rate_provider = rate_provider
        self._supported = supported

    def handle(self, currency: str) -> CurrencyDTO:
        """Switch the display currency. Stored totals are not touched."""
        code = currency.strip().upper()
        if code not in self._supported:
            raise ValidationError(
                f"Unsupported currency '{currency}' (choose from {', '.join(self._supported)})"
            )
        self._preferences.set_currency(code)
        return self.current()

    def current(self) -> CurrencyDTO:
        snapshot = self._rate_provider.current_rates()
        code = self._preferences.get_currency()
        return CurrencyDTO(
            code=code,
            rate=str(rate_for(snapshot.rates, code, snapshot.base_currency)),
            base_currency=snapshot.base_currency,
            source=_SOURCES.get(self._rate_provider.state, "fallback"),  # type: ignore[arg-type]
            captured_at=snapshot.captured_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
