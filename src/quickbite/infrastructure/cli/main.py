import logging

import click

from quickbite.infrastructure.cli.account_commands import (
    account_login,
    account_logout,
    address_add,
    address_list,
    address_select,
)
from quickbite.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_set,
    cart_show,
    coupon_apply,
    coupon_clear,
)
from quickbite.infrastructure.cli.catalog_commands import catalog_list
from quickbite.infrastructure.cli.checkout_commands import checkout
from quickbite.infrastructure.cli.currency_commands import currency_set, currency_show


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """QuickBite — order food with live, currency-aware totals"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def catalog() -> None:
    """Browse the menu."""


@cli.group()
def cart() -> None:
    """Manage the cart."""


@cli.group()
def coupon() -> None:
    """Apply or clear a coupon."""


@cli.group()
def currency() -> None:
    """Choose the display currency."""


@cli.group()
def account() -> None:
    """Log in and out."""


@cli.group()
def address() -> None:
    """Manage delivery addresses."""


# Register subcommands
catalog.add_command(catalog_list)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
coupon.add_command(coupon_apply)
coupon.add_command(coupon_clear)
currency.add_command(currency_set)
currency.add_command(currency_show)
account.add_command(account_login)
account.add_command(account_logout)
address.add_command(address_add)
address.add_command(address_list)
address.add_command(address_select)
cli.add_command(checkout)
