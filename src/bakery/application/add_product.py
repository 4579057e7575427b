"""Application service: Add Product use case."""

from __future__ import annotations

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str,
        stock_quantity: int = 0,
        image: str | None = None,
        description: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=None,
            name=name.strip(),
            price=Money.of(price),
            image=image,
            description=description,
        )
        product.set_stock(stock_quantity)

        with self._uow as uow:
            if uow.products.get_by_name(product.name) is not None:
                raise ValidationError(f"Product '{product.name}' already exists")
            uow.products.save(product)
            uow.commit()

        return product
