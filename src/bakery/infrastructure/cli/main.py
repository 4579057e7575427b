import click

from bakery.infrastructure.cli.address_commands import address_add
from bakery.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from bakery.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_create,
    order_list,
    order_show,
)
from bakery.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_stock,
    product_update,
)
from bakery.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Bakery — storefront orders, cart and catalog"""
    configure_logging()


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def cart() -> None:
    """Manage a shopper's cart."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def address() -> None:
    """Manage saved addresses."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Host to bind to.")
@click.option("--port", "-p", default=8000, show_default=True, type=int, help="Port to bind to.")
def serve(host: str, port: int) -> None:
    """Start the HTTP API server."""
    import uvicorn

    from bakery.infrastructure.api.app import create_app
    from bakery.infrastructure.bootstrap import unit_of_work

    click.echo(f"API docs: http://{host}:{port}/docs")
    uvicorn.run(create_app(unit_of_work), host=host, port=port, workers=1)


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_stock)
product.add_command(product_update)
address.add_command(address_add)
