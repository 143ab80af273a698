"""Locale-aware money formatting for display.

A pure presentation step: it rounds a copy of the amount to the
currency's minor unit and never feeds back into stored or computed
totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class CurrencyConvention:
    code: str
    symbol: str
    decimals: int = 2
    indian_grouping: bool = False  # 12,34,567 instead of 1,234,567


CONVENTIONS: dict[str, CurrencyConvention] = {
    "USD": CurrencyConvention("USD", "$"),
    "EUR": CurrencyConvention("EUR", "€"),
    "GBP": CurrencyConvention("GBP", "£"),
    "INR": CurrencyConvention("INR", "₹", indian_grouping=True),
}


def convention_for(currency: str) -> CurrencyConvention:
    currency = currency.upper()
    return CONVENTIONS.get(currency, CurrencyConvention(currency, f"{currency} "))


def round_for_display(amount: Decimal, currency: str) -> Decimal:
    quantum = Decimal(1).scaleb(-convention_for(currency).decimals)
    return amount.quantize(quantum, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal, currency: str) -> str:
    """Render *amount* (already in *currency*) the way shoppers expect.

    >>> format_money(Decimal("4076.46"), "INR")
    '₹4,076.46'
    >>> format_money(Decimal("123456.789"), "INR")
    '₹1,23,456.79'
    """
    convention = convention_for(currency)
    rounded = round_for_display(amount, currency)
    sign = "-" if rounded < 0 else ""
    whole, _, fraction = f"{abs(rounded):.{convention.decimals}f}".partition(".")
    grouped = _group_indian(whole) if convention.indian_grouping else f"{int(whole):,}"
    body = f"{grouped}.{fraction}" if fraction else grouped
    return f"{sign}{convention.symbol}{body}"


def parse_money(text: str) -> Decimal:
    """Recover the numeric value from a formatted string, ignoring symbols."""
    digits = "".join(ch for ch in text if ch.isdigit() or ch in ".-")
    return Decimal(digits)


def _group_indian(whole: str) -> str:
    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])
