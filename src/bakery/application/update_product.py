"""Application service: Update Product use case."""

from __future__ import annotations

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, new_price: str) -> Product:
        """Update a product's price.

        This does NOT affect any existing orders — their items captured
        a price snapshot at creation time.
        """
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            product.update_price(Money.of(new_price))
            uow.products.save(product)
            uow.commit()

        return product
