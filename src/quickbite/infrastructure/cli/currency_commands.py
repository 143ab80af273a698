"""CLI commands for the display currency."""

from __future__ import annotations

import click

from quickbite.application.dto import CurrencyDTO
from quickbite.application.select_currency import SelectCurrencyHandler
from quickbite.domain.exceptions import DomainException
from quickbite.domain.model.rates import SUPPORTED_CURRENCIES
from quickbite.infrastructure.cli.session import open_storefront


def _display_currency(dto: CurrencyDTO) -> None:
    click.echo(f"Currency: {dto.code}")
    click.echo(f"Rate:     1 {dto.base_currency} = {dto.rate} {dto.code}")
    click.echo(f"Source:   {dto.source} (as of {dto.captured_at})")


@click.command("set")
@click.option(
    "--code",
    required=True,
    type=click.Choice(SUPPORTED_CURRENCIES, case_sensitive=False),
    help="Display currency.",
)
def currency_set(code: str) -> None:
    """Choose the currency prices are displayed in."""
    front = open_storefront()
    handler = SelectCurrencyHandler(front.preferences, front.rate_provider)

    try:
        dto = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_currency(dto)


@click.command("show")
def currency_show() -> None:
    """Show the selected currency and its exchange rate."""
    front = open_storefront()
    _display_currency(SelectCurrencyHandler(front.preferences, front.rate_provider).current())
