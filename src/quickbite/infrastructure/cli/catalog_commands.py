"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from quickbite.application.show_catalog import ShowCatalogHandler
from quickbite.infrastructure.cli.session import fallback_note, open_storefront


@click.command("list")
@click.option("--category", default="all", show_default=True, help="Category tag, or 'all'.")
@click.option("--search", default="", help="Text to look for in name or description.")
def catalog_list(category: str, search: str) -> None:
    """List menu items with prices in the selected currency."""
    front = open_storefront()
    handler = ShowCatalogHandler(front.catalog, front.cart, front.prices)
    items = handler.handle(category=category, search=search)

    if not items:
        click.echo("No items found")
        return

    click.echo(f"{'ID':<4} {'Name':<20} {'Category':<10} {'Price':>14}")
    click.echo("-" * 51)
    for item in items:
        marker = "  (in cart)" if item.in_cart else ""
        click.echo(
            f"{item.id:<4} {item.name:<20} {item.category.capitalize():<10} {item.price:>14}{marker}"
        )
    fallback_note(front)
