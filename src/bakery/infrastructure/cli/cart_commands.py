"""CLI commands for the shopper's cart."""

from __future__ import annotations

import click

from bakery.application.add_to_cart import AddToCartHandler
from bakery.application.remove_cart_item import RemoveCartItemHandler
from bakery.application.show_cart import ShowCartHandler
from bakery.application.update_cart_item import UpdateCartItemHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(user_id: int, product_id: int, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(unit_of_work())

    try:
        line = handler.handle(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart item #{line.id}: {line.product.name} x{line.quantity}")


@click.command("show")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
def cart_show(user_id: int) -> None:
    """Show the cart with subtotals."""
    cart = ShowCartHandler(unit_of_work()).handle(user_id)

    if not cart.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo("-" * 55)
    for line in cart.items:
        click.echo(
            f"{line.id:<6} {line.product.name:<20} {line.quantity:>5} "
            f"{f'₱{line.price:.2f}':>10} {f'₱{line.subtotal:.2f}':>10}"
        )
    click.echo("-" * 55)
    click.echo(f"{'Total':<33} {f'₱{cart.total:.2f}':>21}")


@click.command("update")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
@click.option("--id", "entry_id", required=True, type=int, help="Cart item ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(user_id: int, entry_id: int, quantity: int) -> None:
    """Change the quantity of a cart item."""
    handler = UpdateCartItemHandler(unit_of_work())

    try:
        line = handler.handle(user_id, entry_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if line is None:
        click.echo(f"Cart item #{entry_id} removed.")
    else:
        click.echo(f"Cart item #{entry_id} set to {line.quantity}.")


@click.command("remove")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
@click.option("--id", "entry_id", required=True, type=int, help="Cart item ID.")
def cart_remove(user_id: int, entry_id: int) -> None:
    """Remove an item from the cart."""
    handler = RemoveCartItemHandler(unit_of_work())

    try:
        handler.handle(user_id, entry_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart item #{entry_id} removed.")
