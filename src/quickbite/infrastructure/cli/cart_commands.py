"""CLI commands for the cart and its coupon."""

from __future__ import annotations

import click

from quickbite.application.add_to_cart import AddToCartHandler
from quickbite.application.apply_coupon import ApplyCouponHandler
from quickbite.application.dto import CartDTO
from quickbite.application.remove_from_cart import RemoveFromCartHandler
from quickbite.application.show_cart import ShowCartHandler
from quickbite.application.update_cart_quantity import UpdateCartQuantityHandler
from quickbite.domain.exceptions import DomainException
from quickbite.infrastructure.cli.session import fallback_note, open_storefront


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart and its totals."""
    if not dto.lines:
        click.echo("Your cart is empty")
        return

    click.echo(f"  {'ID':<4} {'Item':<20} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*61}")
    for line in dto.lines:
        click.echo(
            f"  {line.item_id:<4} {line.name:<20} {line.quantity:>5} "
            f"{line.unit_price:>14} {line.line_total:>14}"
        )
    click.echo(f"  {'-'*61}")
    totals = dto.totals
    click.echo(f"  {'Subtotal':<30} {totals.subtotal:>31}")
    click.echo(f"  {'Tax':<30} {totals.tax:>31}")
    click.echo(f"  {'Delivery':<30} {totals.delivery:>31}")
    if totals.coupon:
        click.echo(f"  {'Discount (' + totals.coupon + ')':<30} {'-' + totals.discount:>31}")
    click.echo(f"  {'Total':<30} {totals.total:>31}")
    click.echo(f"  {dto.item_count} item(s), prices in {dto.currency}")


@click.command("add")
@click.option("--item", "item_id", required=True, type=int, help="Catalog item ID.")
def cart_add(item_id: int) -> None:
    """Add an item to the cart."""
    front = open_storefront()
    handler = AddToCartHandler(front.catalog, front.cart)

    try:
        message = handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("set")
@click.option("--item", "item_id", required=True, type=int, help="Catalog item ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity; 0 removes the item.")
def cart_set(item_id: int, quantity: int) -> None:
    """Change the quantity of an item in the cart."""
    front = open_storefront()
    handler = UpdateCartQuantityHandler(front.cart)
    result = handler.handle(item_id, quantity)

    if result is None:
        click.echo(f"Item #{item_id} was not in the cart")
    elif result == 0:
        click.echo("Item removed from cart")
    else:
        click.echo(f"Quantity set to {result}")


@click.command("remove")
@click.option("--item", "item_id", required=True, type=int, help="Catalog item ID.")
def cart_remove(item_id: int) -> None:
    """Remove an item from the cart."""
    front = open_storefront()
    if RemoveFromCartHandler(front.cart).handle(item_id):
        click.echo("Item removed from cart")
    else:
        click.echo(f"Item #{item_id} was not in the cart")


@click.command("show")
def cart_show() -> None:
    """Show the cart with live totals in the selected currency."""
    front = open_storefront()
    handler = ShowCartHandler(
        front.catalog, front.cart, front.engine, front.preferences, front.prices
    )
    _display_cart(handler.handle())
    fallback_note(front)


@click.command("apply")
@click.option("--code", required=True, help="Coupon code, e.g. OFF10.")
def coupon_apply(code: str) -> None:
    """Apply a coupon code (replaces any active coupon)."""
    front = open_storefront()
    outcome = ApplyCouponHandler(front.coupons, front.preferences).handle(code)

    if not outcome.accepted:
        raise click.ClickException(outcome.message)
    click.echo(outcome.message)


@click.command("clear")
def coupon_clear() -> None:
    """Remove the active coupon."""
    front = open_storefront()
    outcome = ApplyCouponHandler(front.coupons, front.preferences).clear()
    click.echo(outcome.message)
