"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from bakery.application.add_product import AddProductHandler
from bakery.application.delete_product import DeleteProductHandler
from bakery.application.list_products import ListProductsHandler
from bakery.application.set_stock import SetStockHandler
from bakery.application.show_product import ShowProductHandler
from bakery.application.update_product import UpdateProductHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 150.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Units in stock.")
@click.option("--image", default=None, help="Image path or URL.")
@click.option("--description", default="", help="Short description.")
def product_add(
    name: str, price: str, stock: int, image: str | None, description: str
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work())

    try:
        product = handler.handle(
            name=name,
            price=price,
            stock_quantity=stock,
            image=image,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock_quantity} in stock)"
    )


@click.command("list")
@click.option("--q", "query", default=None, help="Only products whose name contains this.")
def product_list(query: str | None) -> None:
    """List products in the catalog."""
    products = ListProductsHandler(unit_of_work()).handle(query)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 46)
    for p in products:
        price = f"₱{p.price:.2f}"
        click.echo(f"{p.id:<6} {p.name:<20} {price:>10} {p.stock_quantity:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 165.00).")
def product_update(product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(unit_of_work())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {product.price}")


@click.command("stock")
@click.option("--product", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
def product_stock(product: str, quantity: int) -> None:
    """Set the stock level for a product."""
    handler = SetStockHandler(unit_of_work())

    try:
        handler.handle(product_name=product, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product}' set to {quantity}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(unit_of_work())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}: {dto.name}")
    click.echo(f"  Price: ₱{dto.price:.2f}")
    click.echo(f"  Stock: {dto.stock_quantity}")
    if dto.image:
        click.echo(f"  Image: {dto.image}")
    if dto.description:
        click.echo(f"  {dto.description}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog (and from every cart)."""
    handler = DeleteProductHandler(unit_of_work())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
