"""CLI commands for saved shipping addresses."""

from __future__ import annotations

import click

from bakery.application.add_address import AddAddressHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--user", "user_id", required=True, type=int, help="Shopper ID.")
@click.option("--text", required=True, help="Full address.")
@click.option("--label", default=None, help="Label such as 'Home'.")
def address_add(user_id: int, text: str, label: str | None) -> None:
    """Save a shipping address for a shopper."""
    handler = AddAddressHandler(unit_of_work())

    try:
        address = handler.handle(user_id, text, label)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address #{address.id} saved: {address.formatted()}")
