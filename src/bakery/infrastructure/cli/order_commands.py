"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from bakery.application.cancel_order import CancelOrderHandler
from bakery.application.complete_order import CompleteOrderHandler
from bakery.application.create_order import CreateOrderHandler
from bakery.application.dto import CheckoutRequest, OrderDTO
from bakery.application.list_orders import ListOrdersHandler
from bakery.application.show_order import ShowOrderHandler
from bakery.domain.exceptions import DomainException
from bakery.domain.model.order import PaymentMethod, ShippingMethod
from bakery.infrastructure.bootstrap import unit_of_work


def _parse_ids(raw: str | None) -> list[int]:
    """Parse '3,5,8' into [3, 5, 8]."""
    if not raw:
        return []
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(f"Invalid cart item ID '{part}'.")
    return ids


def _peso(amount) -> str:
    return f"₱{amount:.2f}"


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo(f"Payment:  {dto.payment_method} ({dto.payment_status})")
    click.echo(f"Shipping: {dto.shipping_method} to {dto.shipping_address}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product.name:<20} {item.quantity:>5} "
            f"{_peso(item.price):>10} {_peso(item.subtotal):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {_peso(dto.total_amount):>20}")


@click.command("create")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
@click.option(
    "--payment",
    required=True,
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method.",
)
@click.option(
    "--shipping",
    required=True,
    type=click.Choice([m.value for m in ShippingMethod]),
    help="Shipping method.",
)
@click.option("--address", required=True, help="Shipping address.")
@click.option("--address-id", type=int, default=None, help="Saved address to ship to.")
@click.option("--items", "items_str", default=None, help="Cart item IDs as '1,2,3' (default: whole cart).")
def order_create(
    user_id: int,
    payment: str,
    shipping: str,
    address: str,
    address_id: int | None,
    items_str: str | None,
) -> None:
    """Place an order from the shopper's cart."""
    request = CheckoutRequest(
        payment_method=payment,
        shipping_method=shipping,
        shipping_address=address,
        address_id=address_id,
        cart_item_ids=_parse_ids(items_str),
    )
    handler = CreateOrderHandler(unit_of_work())

    try:
        dto = handler.handle(user_id, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order placed successfully.")
    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
def order_list(user_id: int) -> None:
    """List the shopper's orders, newest first."""
    dtos = ListOrdersHandler(unit_of_work()).handle(user_id)

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Status':<10} {'Items':>5} {'Total':>12}")
    click.echo("-" * 49)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.created_at.strftime('%Y-%m-%d'):<12} {dto.status:<10} "
            f"{dto.items_count:>5} {_peso(dto.total_amount):>12}"
        )


@click.command("show")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(user_id: int, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work())

    try:
        dto = handler.handle(user_id, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("cancel")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(user_id: int, order_id: int) -> None:
    """Cancel a pending order (puts its items back in stock)."""
    handler = CancelOrderHandler(unit_of_work())

    try:
        handler.handle(user_id, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
def order_complete(order_id: int) -> None:
    """Mark a pending order as completed."""
    handler = CompleteOrderHandler(unit_of_work())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} completed.")
