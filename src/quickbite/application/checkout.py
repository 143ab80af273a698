"""Application service: Checkout use case.

No payment and no server-side order: a successful checkout confirms the
total and empties the cart. Preconditions are checked in a fixed order
and the first failure is raised as CheckoutRejected with its reason.
Nothing is written unless every precondition holds.
"""

from __future__ import annotations

import logging

from quickbite.application.dto import ReceiptDTO
from quickbite.application.price_display import PriceDisplay
from quickbite.domain.exceptions import CheckoutBlock, CheckoutRejected
from quickbite.domain.model.cart import CartLedger
from quickbite.domain.repository.account_repository import AccountRepository
from quickbite.domain.repository.preferences_repository import PreferencesRepository
from quickbite.domain.service.pricing_engine import PricingEngine

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart: CartLedger,
        account_repo: AccountRepository,
        preferences: PreferencesRepository,
        engine: PricingEngine,
        prices: PriceDisplay,
    ) -> None:
        self._cart = cart
        self._account_repo = account_repo
        self._preferences = preferences
        self._engine = engine
        self._prices = prices

    def handle(self) -> ReceiptDTO:
        if self._cart.is_empty:
            raise CheckoutRejected(CheckoutBlock.EMPTY_CART)

        user = self._account_repo.get_user()
        if user is None:
            raise CheckoutRejected(CheckoutBlock.LOGIN_REQUIRED)

        address_id = self._account_repo.get_selected_address_id()
        if not address_id:
            raise CheckoutRejected(CheckoutBlock.ADDRESS_REQUIRED)

        address = next(
            (a for a in self._account_repo.list_addresses() if a.id == address_id),
            None,
        )
        if address is None:
            raise CheckoutRejected(CheckoutBlock.ADDRESS_NOT_FOUND)

        totals = self._engine.compute_totals(self._cart, self._preferences.get_coupon())
        receipt = ReceiptDTO(
            customer_name=user.name,
            address_label=address.label,
            item_count=self._cart.item_count,
            total=self._prices.format(totals.total),
            currency=self._prices.currency,
        )
        self._cart.clear()
        logger.info("Order placed for %s to %s (%s items)", user.email, address.id, receipt.item_count)
        return receipt
