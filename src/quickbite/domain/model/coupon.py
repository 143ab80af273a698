"""Coupon policy — maps a coupon code to the discount it grants.

Coupons are global string codes with no per-user eligibility. Lookup is
pure: resolving a code never touches stored state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from quickbite.domain.model.value_objects import Money


class DiscountKind(Enum):
    PERCENT = "PERCENT"
    FLAT = "FLAT"
    FREE_SHIPPING = "FREE_SHIPPING"


@dataclass(frozen=True)
class DiscountRule:
    """One of ``percent(value)``, ``flat(amount)`` or ``free_shipping``."""

    code: str
    kind: DiscountKind
    value: Decimal = Decimal("0")

    @staticmethod
    def percent(code: str, value: str | Decimal) -> DiscountRule:
        return DiscountRule(code, DiscountKind.PERCENT, Decimal(value))

    @staticmethod
    def flat(code: str, amount: str | Decimal) -> DiscountRule:
        return DiscountRule(code, DiscountKind.FLAT, Decimal(amount))

    @staticmethod
    def free_shipping(code: str) -> DiscountRule:
        return DiscountRule(code, DiscountKind.FREE_SHIPPING)

    @property
    def waives_delivery(self) -> bool:
        return self.kind is DiscountKind.FREE_SHIPPING

    def discount_on(self, subtotal: Money) -> Money:
        """Amount taken off *subtotal*; never more than the subtotal itself."""
        if self.kind is DiscountKind.PERCENT:
            return subtotal * (self.value / Decimal("100"))
        if self.kind is DiscountKind.FLAT:
            return Money(self.value, subtotal.currency).minimum(subtotal)
        return Money.zero()

    def describe(self) -> str:
        if self.kind is DiscountKind.PERCENT:
            return f"{self.value.normalize()}% off"
        if self.kind is DiscountKind.FLAT:
            return f"{self.value.normalize()} off"
        return "free delivery"


class CouponNotFound:
    """Resolution result for a non-empty code that is not in the registry."""

    def __init__(self, code: str) -> None:
        self.code = code

    def __repr__(self) -> str:
        return f"CouponNotFound({self.code!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CouponNotFound) and other.code == self.code

    def __hash__(self) -> int:
        return hash(self.code)


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


class CouponPolicy:
    """Fixed registry of coupon codes."""

    def __init__(self, rules: list[DiscountRule] | None = None) -> None:
        rules = DEFAULT_COUPONS if rules is None else rules
        self._rules = {normalize_code(rule.code): rule for rule in rules}

    def resolve(self, code: str | None) -> DiscountRule | CouponNotFound | None:
        """Look up *code*, case-insensitively and trimmed.

        Returns None for an empty or unset code (no discount, not an error)
        and CouponNotFound for any other unknown code.
        """
        normalized = normalize_code(code)
        if not normalized:
            return None
        rule = self._rules.get(normalized)
        if rule is None:
            return CouponNotFound(normalized)
        return rule


DEFAULT_COUPONS: list[DiscountRule] = [
    DiscountRule.percent("OFF10", "10"),
    DiscountRule.flat("FLAT5", "5"),
    DiscountRule.free_shipping("FREESHIP"),
]
