"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutBlock(Enum):
    """Why an order could not be placed, in the order they are checked."""

    EMPTY_CART = "EMPTY_CART"
    LOGIN_REQUIRED = "LOGIN_REQUIRED"
    ADDRESS_REQUIRED = "ADDRESS_REQUIRED"
    ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"


_CHECKOUT_MESSAGES = {
    CheckoutBlock.EMPTY_CART: "Your cart is empty!",
    CheckoutBlock.LOGIN_REQUIRED: "Please login to continue.",
    CheckoutBlock.ADDRESS_REQUIRED: "Please select a delivery address.",
    CheckoutBlock.ADDRESS_NOT_FOUND: "Selected address not found. Please choose again.",
}


class CheckoutRejected(DomainException):
    """A checkout precondition failed; ``reason`` tells the caller where to go."""

    def __init__(self, reason: CheckoutBlock) -> None:
        super().__init__(_CHECKOUT_MESSAGES[reason])
        self.reason = reason


class RateSourceError(Exception):
    """The remote exchange-rate source could not produce a usable table.

    Never reaches the user; the rate provider always recovers from it
    by falling back to the static table.
    """


class ConfigurationError(Exception):
    """An environment setting could not be parsed."""
