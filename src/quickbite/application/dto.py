"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Every price in a DTO is
already converted and formatted for the shopper's display currency.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogItemDTO:
    id: int
    name: str
    category: str
    description: str
    price: str  # formatted, e.g. "₹1,065.18"
    in_cart: bool


@dataclass(frozen=True)
class CartLineDTO:
    item_id: int
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class TotalsDTO:
    subtotal: str
    tax: str
    delivery: str
    discount: str
    total: str
    coupon: str | None  # active coupon code, if it resolved


@dataclass(frozen=True)
class CartDTO:
    currency: str
    lines: list[CartLineDTO]
    item_count: int
    totals: TotalsDTO
    fallback_rates: bool  # True when prices use the static demo rates


@dataclass(frozen=True)
class CouponOutcome:
    """Result of trying to apply a coupon; rejection is not an error."""

    accepted: bool
    code: str | None
    message: str


@dataclass(frozen=True)
class CurrencyDTO:
    code: str
    rate: str
    base_currency: str
    source: str  # "cache", "remote" or "fallback"
    captured_at: str


@dataclass(frozen=True)
class AddressDTO:
    id: str
    label: str
    full_name: str
    phone: str
    summary: str
    selected: bool


@dataclass(frozen=True)
class ReceiptDTO:
    customer_name: str
    address_label: str
    item_count: int
    total: str
    currency: str
