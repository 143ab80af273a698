"""Exchange-rate snapshots.

A RateSnapshot is an immutable rate table plus the moment it was
captured. Multipliers convert one unit of the base currency into the
quoted currency (``USD -> INR == 82``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from quickbite.domain.exceptions import ValidationError
from quickbite.domain.model.value_objects import BASE_CURRENCY

SUPPORTED_CURRENCIES: tuple[str, ...] = ("USD", "INR", "EUR", "GBP")

# Static demo rates, used whenever neither cache nor remote can help.
FALLBACK_RATES: Mapping[str, Decimal] = MappingProxyType({
    "USD": Decimal("1"),
    "INR": Decimal("82"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
})

DEFAULT_TTL = timedelta(hours=12)

# Upper bound for a single multiplier; anything above is treated as garbage.
MAX_RATE = Decimal("1000000")


@dataclass(frozen=True)
class RateSnapshot:
    """Invariant: ``rates[base_currency] == 1``."""

    captured_at: datetime
    base_currency: str
    rates: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        rates = {code.upper(): Decimal(value) for code, value in self.rates.items()}
        for code, value in rates.items():
            if not is_valid_rate(value):
                raise ValidationError(
                    f"Rate for {code} must be a positive number up to {MAX_RATE}, got {value}"
                )
        rates[self.base_currency] = Decimal("1")
        object.__setattr__(self, "rates", MappingProxyType(rates))

    def is_fresh(self, now: datetime, ttl: timedelta = DEFAULT_TTL) -> bool:
        """A snapshot captured in the future is never fresh."""
        age = now - self.captured_at
        return timedelta(0) <= age < ttl

    def filled_from(self, fallback: Mapping[str, Decimal], currencies: tuple[str, ...]) -> RateSnapshot:
        """Same snapshot with any missing currency taken from *fallback*."""
        rates = dict(self.rates)
        for code in currencies:
            if code not in rates and code in fallback:
                rates[code] = fallback[code]
        return RateSnapshot(self.captured_at, self.base_currency, rates)

    def missing(self, currencies: tuple[str, ...]) -> list[str]:
        return [code for code in currencies if code not in self.rates]


def is_valid_rate(value: Decimal) -> bool:
    return value.is_finite() and Decimal("0") < value <= MAX_RATE


def fallback_rates(base_currency: str = BASE_CURRENCY) -> dict[str, Decimal]:
    """The static table re-expressed against *base_currency*.

    ``FALLBACK_RATES`` is quoted against USD; for any other base every
    entry is divided by the base's own USD rate. An unknown base leaves
    the table as it is.
    """
    divisor = FALLBACK_RATES.get(base_currency.upper())
    if divisor is None:
        return dict(FALLBACK_RATES)
    return {code: rate / divisor for code, rate in FALLBACK_RATES.items()}


def fallback_snapshot(now: datetime, base_currency: str = BASE_CURRENCY) -> RateSnapshot:
    return RateSnapshot(now, base_currency, fallback_rates(base_currency))


def rate_for(rates: Mapping[str, Decimal], currency: str, base_currency: str = BASE_CURRENCY) -> Decimal:
    """Multiplier from the base currency into *currency*.

    1 for the base itself, the table entry if present, otherwise the
    static fallback constant (and 1 if even that is unknown).
    """
    currency = currency.upper()
    if currency == base_currency:
        return Decimal("1")
    if currency in rates:
        return rates[currency]
    return fallback_rates(base_currency).get(currency, Decimal("1"))
