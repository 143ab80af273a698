"""CLI command for placing the order."""

from __future__ import annotations

import click

from quickbite.application.checkout import CheckoutHandler
from quickbite.domain.exceptions import CheckoutBlock, CheckoutRejected
from quickbite.infrastructure.cli.session import open_storefront

_NEXT_STEP = {
    CheckoutBlock.EMPTY_CART: "Add something with 'quickbite cart add --item ID'.",
    CheckoutBlock.LOGIN_REQUIRED: "Run 'quickbite account login'.",
    CheckoutBlock.ADDRESS_REQUIRED: "Run 'quickbite address add' or 'quickbite address select'.",
    CheckoutBlock.ADDRESS_NOT_FOUND: "Run 'quickbite address list' and select again.",
}


@click.command("checkout")
def checkout() -> None:
    """Place the order (requires login and a selected address)."""
    front = open_storefront()
    handler = CheckoutHandler(
        front.cart, front.accounts, front.preferences, front.engine, front.prices
    )

    try:
        receipt = handler.handle()
    except CheckoutRejected as exc:
        raise click.ClickException(f"{exc} {_NEXT_STEP[exc.reason]}")

    click.echo(f"Order placed to {receipt.address_label} — Total: {receipt.total}")
