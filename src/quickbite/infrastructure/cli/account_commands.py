"""CLI commands for login and delivery addresses."""

from __future__ import annotations

import click

from quickbite.application.login import LoginHandler, LogoutHandler
from quickbite.application.manage_addresses import (
    ListAddressesHandler,
    SaveAddressHandler,
    SelectAddressHandler,
)
from quickbite.domain.exceptions import DomainException
from quickbite.infrastructure.cli.session import open_storefront


@click.command("login")
@click.option("--name", required=True, help="Your name.")
@click.option("--email", required=True, help="Your email.")
@click.option("--phone", default="", help="Phone number.")
def account_login(name: str, email: str, phone: str) -> None:
    """Log in (stores the user locally)."""
    handler = LoginHandler(open_storefront().accounts)

    try:
        user = handler.handle(name=name, email=email, phone=phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome, {user.name}!")


@click.command("logout")
def account_logout() -> None:
    """Log out."""
    LogoutHandler(open_storefront().accounts).handle()
    click.echo("Logged out.")


@click.command("add")
@click.option("--label", default="Home", show_default=True, help="Home, Work, ...")
@click.option("--full-name", required=True)
@click.option("--phone", required=True)
@click.option("--line1", required=True)
@click.option("--line2", default="")
@click.option("--city", required=True)
@click.option("--state", required=True)
@click.option("--pincode", required=True)
@click.option("--lat", type=float, default=None, help="Latitude, if known.")
@click.option("--lon", type=float, default=None, help="Longitude, if known.")
def address_add(**fields: object) -> None:
    """Save a delivery address and select it."""
    handler = SaveAddressHandler(open_storefront().accounts)

    try:
        address = handler.handle(**fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address saved. [{address.id}] {address.label} selected.")


@click.command("list")
def address_list() -> None:
    """List saved addresses."""
    addresses = ListAddressesHandler(open_storefront().accounts).handle()

    if not addresses:
        click.echo("No saved addresses yet.")
        return

    for a in addresses:
        marker = "*" if a.selected else " "
        click.echo(f"{marker} [{a.id}] {a.label} — {a.full_name} ({a.phone})")
        click.echo(f"    {a.summary}")


@click.command("select")
@click.option("--id", "address_id", required=True, help="Address ID.")
def address_select(address_id: str) -> None:
    """Select a saved address for delivery."""
    handler = SelectAddressHandler(open_storefront().accounts)

    try:
        address = handler.handle(address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address selected: {address.label}")
