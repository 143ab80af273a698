"""Unit tests for RateSnapshot and rate lookup."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from quickbite.domain.exceptions import ValidationError
from quickbite.domain.model.rates import (
    FALLBACK_RATES,
    RateSnapshot,
    fallback_rates,
    fallback_snapshot,
    rate_for,
)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestRateSnapshot:

    def test_base_rate_forced_to_one(self):
        snap = RateSnapshot(T0, "USD", {"USD": Decimal("3"), "INR": Decimal("83")})
        assert snap.rates["USD"] == Decimal("1")

    def test_codes_uppercased(self):
        snap = RateSnapshot(T0, "USD", {"inr": Decimal("83")})
        assert "INR" in snap.rates

    def test_non_positive_rate_rejected(self):
        with pytest.raises(ValidationError, match="positive"):
            RateSnapshot(T0, "USD", {"INR": Decimal("0")})

    def test_freshness_window(self):
        snap = RateSnapshot(T0, "USD", {})
        assert snap.is_fresh(T0 + timedelta(hours=11, minutes=59))
        assert not snap.is_fresh(T0 + timedelta(hours=12))
        assert not snap.is_fresh(T0 + timedelta(hours=12, minutes=1))

    def test_future_capture_is_not_fresh(self):
        snap = RateSnapshot(T0 + timedelta(minutes=1), "USD", {})
        assert not snap.is_fresh(T0)
        assert snap.is_fresh(T0 + timedelta(minutes=1))

    @pytest.mark.parametrize("value", ["Infinity", "NaN", "1E+40"])
    def test_unbounded_rate_rejected(self, value):
        with pytest.raises(ValidationError):
            RateSnapshot(T0, "USD", {"INR": Decimal(value)})

    def test_filled_from_keeps_existing_values(self):
        snap = RateSnapshot(T0, "USD", {"INR": Decimal("83")})
        filled = snap.filled_from(FALLBACK_RATES, ("USD", "INR", "EUR"))
        assert filled.rates["INR"] == Decimal("83")
        assert filled.rates["EUR"] == Decimal("0.92")
        assert filled.captured_at == T0


class TestRateFor:

    def test_base_is_one(self):
        assert rate_for({}, "usd") == Decimal("1")

    def test_table_value(self):
        assert rate_for({"EUR": Decimal("0.9")}, "EUR") == Decimal("0.9")

    def test_absent_uses_fallback(self):
        assert rate_for({}, "INR") == Decimal("82")

    def test_absent_uses_fallback_rebased_on_base(self):
        assert rate_for({}, "USD", "EUR") == Decimal("1") / Decimal("0.92")
        assert rate_for({}, "INR", "EUR") == Decimal("82") / Decimal("0.92")


class TestFallbackTable:

    def test_usd_base_is_the_static_table(self):
        assert fallback_rates("USD") == dict(FALLBACK_RATES)

    def test_rebased_table_keeps_base_at_one(self):
        assert fallback_snapshot(T0, "GBP").rates["GBP"] == Decimal("1")
        assert fallback_rates("GBP")["INR"] == Decimal("82") / Decimal("0.79")

    def test_unknown_base_leaves_table_unchanged(self):
        assert fallback_rates("JPY") == dict(FALLBACK_RATES)
