"""Tests for the SelectCurrency use case."""

import pytest

from quickbite.application.select_currency import SelectCurrencyHandler
from quickbite.domain.exceptions import ValidationError
from tests.application.helpers import make_storefront
from tests.fakes import FakeRateSource


class TestSelectCurrency:

    def test_switch(self):
        front, store = make_storefront()
        dto = SelectCurrencyHandler(front.preferences, front.rate_provider).handle("gbp")
        assert dto.code == "GBP"
        assert dto.rate == "0.79"
        assert dto.source == "fallback"
        assert store.data["qb_currency"] == "GBP"

    def test_unsupported_rejected(self):
        front, store = make_storefront()
        with pytest.raises(ValidationError, match="Unsupported currency"):
            SelectCurrencyHandler(front.preferences, front.rate_provider).handle("JPY")
        assert "qb_currency" not in store.data

    def test_remote_source_reported(self):
        front, _ = make_storefront(source=FakeRateSource({"INR": "83.5"}))
        dto = SelectCurrencyHandler(front.preferences, front.rate_provider).handle("INR")
        assert dto.rate == "83.5"
        assert dto.source == "remote"

    def test_current_uses_default(self):
        front, _ = make_storefront(default_currency="EUR")
        assert SelectCurrencyHandler(front.preferences, front.rate_provider).current().code == "EUR"
