"""Domain service: Pricing Engine.

Turns a cart into Totals (subtotal, tax, delivery, discount, total) in
the base currency, and converts amounts to the shopper's display
currency at the very last step.

Nothing here reads or writes the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

from quickbite.domain.model.cart import CartLedger
from quickbite.domain.model.coupon import CouponPolicy, DiscountRule
from quickbite.domain.model.rates import rate_for
from quickbite.domain.model.value_objects import BASE_CURRENCY, Money
from quickbite.domain.service.currency_format import format_money


@dataclass(frozen=True)
class PricingPolicy:
    """Policy values; configurable, never hard-coded in the computation."""

    tax_rate: Decimal = Decimal("0.05")
    delivery_fee: Money = Money(Decimal("2.50"))
    free_delivery_threshold: Money = Money(Decimal("25"))


@dataclass(frozen=True)
class Totals:
    """Derived, never persisted. ``total = max(0, subtotal + tax + delivery - discount)``."""

    subtotal: Money
    tax: Money
    delivery: Money
    discount: Money
    total: Money
    coupon: DiscountRule | None = None


class PricingEngine:

    def __init__(
        self,
        policy: PricingPolicy | None = None,
        coupons: CouponPolicy | None = None,
        base_currency: str = BASE_CURRENCY,
    ) -> None:
        self.policy = policy or PricingPolicy()
        self.coupons = coupons or CouponPolicy()
        self.base_currency = base_currency

    def compute_totals(self, cart: CartLedger, coupon_code: str | None) -> Totals:
        return self.totals_for(cart.subtotal(), coupon_code)

    def totals_for(self, subtotal: Money, coupon_code: str | None) -> Totals:
        """Price a subtotal with an optional coupon.

        Delivery is decided on the subtotal *before* any coupon applies;
        tax is a flat rate on the subtotal only. Unknown or empty coupon
        codes simply grant nothing.
        """
        policy = self.policy
        if subtotal >= policy.free_delivery_threshold:
            delivery = Money.zero()
        else:
            delivery = policy.delivery_fee
        tax = subtotal * policy.tax_rate
        discount = Money.zero()

        resolved = self.coupons.resolve(coupon_code)
        rule = resolved if isinstance(resolved, DiscountRule) else None
        if rule is not None:
            if rule.waives_delivery:
                delivery = Money.zero()
            else:
                discount = rule.discount_on(subtotal)

        gross = subtotal.amount + tax.amount + delivery.amount - discount.amount
        total = Money(max(Decimal("0"), gross))
        return Totals(
            subtotal=subtotal,
            tax=tax,
            delivery=delivery,
            discount=discount,
            total=total,
            coupon=rule,
        )

    # --- Display --------------------------------------------------------------

    def convert(self, amount: Money, currency: str, rates: Mapping[str, Decimal]) -> Decimal:
        """``amount * rate`` in *currency*; full precision, no rounding."""
        return amount.amount * rate_for(rates, currency, self.base_currency)

    def display(self, amount: Money, currency: str, rates: Mapping[str, Decimal]) -> str:
        return format_money(self.convert(amount, currency, rates), currency)
