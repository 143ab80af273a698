"""Tests for the HTTP RateSource using httpx's mock transport."""

from decimal import Decimal

import httpx
import pytest

from quickbite.domain.exceptions import RateSourceError
from quickbite.infrastructure.http.http_rate_source import HttpRateSource


def _source(handler) -> tuple[HttpRateSource, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.Client(transport=httpx.MockTransport(record))
    return HttpRateSource("https://rates.test/latest/{base}", client=client), seen


class TestHttpRateSource:

    def test_parses_rates(self):
        source, seen = _source(
            lambda r: httpx.Response(200, json={"base": "USD", "rates": {"INR": 83.1, "eur": 0.92}})
        )
        rates = source.fetch("USD")
        assert rates == {"INR": Decimal("83.1"), "EUR": Decimal("0.92")}
        assert str(seen[0].url) == "https://rates.test/latest/USD"

    def test_single_attempt_on_error_status(self):
        source, seen = _source(lambda r: httpx.Response(503))
        with pytest.raises(RateSourceError):
            source.fetch("USD")
        assert len(seen) == 1

    def test_missing_rates_field(self):
        source, _ = _source(lambda r: httpx.Response(200, json={"result": "error"}))
        with pytest.raises(RateSourceError, match="rates"):
            source.fetch("USD")

    def test_invalid_json(self):
        source, _ = _source(lambda r: httpx.Response(200, content=b"<html>"))
        with pytest.raises(RateSourceError, match="not JSON"):
            source.fetch("USD")

    @pytest.mark.parametrize("value", ["abc", None, True, -1, 0])
    def test_bad_rate_values(self, value):
        source, _ = _source(lambda r: httpx.Response(200, json={"rates": {"INR": value}}))
        with pytest.raises(RateSourceError):
            source.fetch("USD")

    def test_transport_error(self):
        def boom(request):
            raise httpx.ConnectError("no route", request=request)

        source, _ = _source(boom)
        with pytest.raises(RateSourceError, match="failed"):
            source.fetch("USD")

    @pytest.mark.parametrize("value", ["1E+40", "Infinity", "NaN"])
    def test_out_of_range_rate_for_supported_currency(self, value):
        source, _ = _source(lambda r: httpx.Response(200, json={"rates": {"INR": value}}))
        with pytest.raises(RateSourceError):
            source.fetch("USD")

    def test_unsupported_currencies_skipped_without_validation(self):
        payload = {"rates": {"INR": 83, "EUR": 0.9, "XXX": None, "ZWL": "1E+40"}}
        source, _ = _source(lambda r: httpx.Response(200, json=payload))
        assert source.fetch("USD") == {"INR": Decimal("83"), "EUR": Decimal("0.9")}
