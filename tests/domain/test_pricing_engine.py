"""Unit tests for the PricingEngine domain service."""

from decimal import Decimal

import pytest

from quickbite.domain.model.cart import CartLedger
from quickbite.domain.model.catalog import default_catalog
from quickbite.domain.model.coupon import CouponPolicy, DiscountRule
from quickbite.domain.model.rates import FALLBACK_RATES
from quickbite.domain.model.value_objects import Money
from quickbite.domain.service.currency_format import parse_money
from quickbite.domain.service.pricing_engine import PricingEngine, PricingPolicy
from quickbite.infrastructure.persistence.kv_cart_repository import KeyValueCartRepository
from tests.fakes import FakeKeyValueStore


def _cart(*lines: tuple[int, int]) -> CartLedger:
    cart = CartLedger(default_catalog(), KeyValueCartRepository(FakeKeyValueStore()))
    for item_id, qty in lines:
        cart.add(item_id)
        cart.set_quantity(item_id, qty)
    return cart


# Classic Burger x2 @12.99 + Margherita Pizza x1 @18.99
BURGERS_AND_PIZZA = ((1, 2), (2, 1))


class TestScenarios:

    def test_no_coupon(self):
        totals = PricingEngine().compute_totals(_cart(*BURGERS_AND_PIZZA), None)
        assert totals.subtotal.amount == Decimal("44.97")
        assert totals.tax.amount == Decimal("2.2485")
        assert totals.delivery.amount == Decimal("2.5")
        assert totals.discount.amount == Decimal("0")
        assert totals.total.amount == Decimal("49.7185")

    def test_off10(self):
        totals = PricingEngine().compute_totals(_cart(*BURGERS_AND_PIZZA), "OFF10")
        assert totals.discount.amount == Decimal("4.497")
        assert totals.delivery.amount == Decimal("2.5")
        assert totals.total.amount == Decimal("45.2215")
        assert totals.coupon.code == "OFF10"

    def test_above_threshold_delivers_free(self):
        totals = PricingEngine().totals_for(Money.of("30"), None)
        assert totals.delivery == Money.zero()

    def test_exactly_at_threshold_delivers_free(self):
        assert PricingEngine().totals_for(Money.of("25"), None).delivery == Money.zero()

    def test_unknown_coupon_grants_nothing(self):
        totals = PricingEngine().compute_totals(_cart(*BURGERS_AND_PIZZA), "XYZ")
        assert totals.discount == Money.zero()
        assert totals.total.amount == Decimal("49.7185")
        assert totals.coupon is None


class TestCoupons:

    def test_freeship_waives_delivery_only(self):
        totals = PricingEngine().totals_for(Money.of("10"), "freeship")
        assert totals.delivery == Money.zero()
        assert totals.discount == Money.zero()
        assert totals.total.amount == Decimal("10.50")

    def test_flat5_reduces_discount_not_delivery(self):
        totals = PricingEngine().totals_for(Money.of("10"), "FLAT5")
        assert totals.discount == Money.of("5")
        assert totals.delivery.amount == Decimal("2.50")
        assert totals.total.amount == Decimal("8.00")

    def test_flat5_never_exceeds_subtotal(self):
        totals = PricingEngine().totals_for(Money.of("3"), "FLAT5")
        assert totals.discount == Money.of("3")

    def test_tax_ignores_coupon_and_delivery(self):
        engine = PricingEngine()
        for code in (None, "OFF10", "FLAT5", "FREESHIP"):
            totals = engine.totals_for(Money.of("20"), code)
            assert totals.tax.amount == Decimal("1.00")

    def test_delivery_decided_before_coupon(self):
        # 26.00 qualifies for free delivery even though OFF10 brings it under 25.
        totals = PricingEngine().totals_for(Money.of("26"), "OFF10")
        assert totals.delivery == Money.zero()


class TestTotalFloor:

    @pytest.mark.parametrize("subtotal", ["0", "0.01", "3", "24.99", "25", "100"])
    @pytest.mark.parametrize("code", [None, "", "OFF10", "FLAT5", "FREESHIP", "BOGUS"])
    def test_total_never_negative(self, subtotal, code):
        totals = PricingEngine().totals_for(Money.of(subtotal), code)
        assert totals.total.amount >= 0

    def test_oversized_discount_clamps_to_zero(self):
        engine = PricingEngine(
            PricingPolicy(tax_rate=Decimal("0")),
            CouponPolicy([DiscountRule.percent("ALL", "200")]),
        )
        totals = engine.totals_for(Money.of("30"), "ALL")
        assert totals.total == Money.zero()


class TestConfigurablePolicy:

    def test_custom_constants(self):
        policy = PricingPolicy(
            tax_rate=Decimal("0.10"),
            delivery_fee=Money.of("4"),
            free_delivery_threshold=Money.of("50"),
        )
        totals = PricingEngine(policy).totals_for(Money.of("40"), None)
        assert totals.tax.amount == Decimal("4.00")
        assert totals.delivery == Money.of("4")
        assert totals.total.amount == Decimal("48.00")


class TestDisplay:

    def test_convert_uses_rate(self):
        engine = PricingEngine()
        assert engine.convert(Money.of("10"), "INR", FALLBACK_RATES) == Decimal("820")

    def test_base_currency_unconverted(self):
        assert PricingEngine().display(Money.of("49.7185"), "USD", {}) == "$49.72"

    def test_missing_rate_uses_fallback_constant(self):
        assert PricingEngine().convert(Money.of("1"), "GBP", {"USD": Decimal("1")}) == Decimal("0.79")

    @pytest.mark.parametrize("currency", ["USD", "INR", "EUR", "GBP"])
    def test_format_roundtrip_within_half_unit(self, currency):
        engine = PricingEngine()
        amount = Money.of("49.7185")
        expected = engine.convert(amount, currency, FALLBACK_RATES)
        shown = parse_money(engine.display(amount, currency, FALLBACK_RATES))
        assert abs(shown - expected) <= Decimal("0.005")

    def test_display_does_not_change_totals(self):
        engine = PricingEngine()
        totals = engine.totals_for(Money.of("44.97"), None)
        engine.display(totals.total, "INR", FALLBACK_RATES)
        assert totals.total.amount == Decimal("49.7185")
