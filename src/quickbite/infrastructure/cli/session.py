"""Opens the storefront for a CLI command, reporting config problems cleanly."""

from __future__ import annotations

import click

from quickbite.domain.exceptions import ConfigurationError, DomainException
from quickbite.infrastructure.bootstrap import Storefront, storefront


def open_storefront() -> Storefront:
    try:
        return storefront()
    except (ConfigurationError, DomainException) as exc:
        raise click.UsageError(f"Configuration error: {exc}")


def fallback_note(front: Storefront) -> None:
    if front.prices.using_fallback:
        click.echo("(prices use offline demo exchange rates)", err=True)
