"""Tests for the ApplyCoupon use case."""

from quickbite.application.apply_coupon import ApplyCouponHandler
from tests.application.helpers import make_storefront


def _setup():
    front, store = make_storefront()
    return ApplyCouponHandler(front.coupons, front.preferences), front, store


class TestApplyCoupon:

    def test_known_code_is_stored_normalized(self):
        handler, front, _ = _setup()
        outcome = handler.handle("  off10")
        assert outcome.accepted
        assert outcome.code == "OFF10"
        assert "10% off" in outcome.message
        assert front.preferences.get_coupon() == "OFF10"

    def test_new_code_replaces_old(self):
        handler, front, _ = _setup()
        handler.handle("OFF10")
        handler.handle("FREESHIP")
        assert front.preferences.get_coupon() == "FREESHIP"

    def test_unknown_code_rejected_without_mutation(self):
        handler, front, store = _setup()
        handler.handle("FLAT5")
        before = dict(store.data)

        outcome = handler.handle("XYZ")

        assert not outcome.accepted
        assert "XYZ" in outcome.message
        assert outcome.code == "FLAT5"
        assert store.data == before

    def test_unknown_code_with_no_active_coupon(self):
        handler, front, store = _setup()
        outcome = handler.handle("XYZ")
        assert not outcome.accepted
        assert outcome.code is None
        assert "qb_coupon" not in store.data

    def test_empty_code_clears(self):
        handler, front, _ = _setup()
        handler.handle("OFF10")
        outcome = handler.handle("   ")
        assert outcome.accepted
        assert front.preferences.get_coupon() is None

    def test_clear(self):
        handler, front, _ = _setup()
        handler.handle("OFF10")
        assert handler.clear().message == "Coupon removed."
        assert front.preferences.get_coupon() is None
