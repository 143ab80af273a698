"""HTTP implementation of RateSource.

Talks to an exchangerate-api style endpoint: ``GET <url>`` returns
``{"base": "USD", "rates": {"INR": 83.1, ...}}``.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

import httpx

from quickbite.domain.exceptions import RateSourceError
from quickbite.domain.model.rates import MAX_RATE, SUPPORTED_CURRENCIES, is_valid_rate
from quickbite.domain.repository.rate_source import RateSource

logger = logging.getLogger(__name__)

DEFAULT_RATES_URL = "https://api.exchangerate-api.com/v4/latest/{base}"


class HttpRateSource(RateSource):
    """One GET per fetch, no retry.

    Only *currencies* are read from the payload; entries for any other
    code are skipped unvalidated.

    No timeout is imposed unless one is configured; httpx's own default
    then bounds a hung request, so the fallback path stays reachable.
    """

    def __init__(
        self,
        url_template: str = DEFAULT_RATES_URL,
        *,
        timeout: float | None = None,
        client: httpx.Client | None = None,
        currencies: tuple[str, ...] = SUPPORTED_CURRENCIES,
    ) -> None:
        self._url_template = url_template
        self._timeout = timeout
        self._client = client
        self._currencies = currencies

    def fetch(self, base_currency: str) -> dict[str, Decimal]:
        url = self._url_template.format(base=base_currency)
        logger.debug("Fetching exchange rates from %s", url)
        try:
            if self._client is not None:
                response = self._client.get(url)
            else:
                kwargs = {} if self._timeout is None else {"timeout": self._timeout}
                with httpx.Client(**kwargs) as client:
                    response = client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise RateSourceError(f"request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise RateSourceError(f"response from {url} is not JSON") from exc

        return self._parse(payload)

    def _parse(self, payload: object) -> dict[str, Decimal]:
        if not isinstance(payload, dict) or not isinstance(payload.get("rates"), dict):
            raise RateSourceError("response has no 'rates' object")
        rates: dict[str, Decimal] = {}
        skipped = []
        for code, value in payload["rates"].items():
            code = str(code).upper()
            if code not in self._currencies:
                skipped.append(code)
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                raise RateSourceError(f"rate for {code} is not numeric: {value!r}")
            try:
                rate = Decimal(str(value))
            except InvalidOperation as exc:
                raise RateSourceError(f"rate for {code} is not numeric: {value!r}") from exc
            if not is_valid_rate(rate):
                raise RateSourceError(
                    f"rate for {code} is out of range (0, {MAX_RATE}]: {value!r}"
                )
            rates[code] = rate
        if skipped:
            logger.debug("Ignoring %d unsupported currencies in rate payload", len(skipped))
        return rates
