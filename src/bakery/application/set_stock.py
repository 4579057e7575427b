"""Application service: Set Stock use case."""

from __future__ import annotations

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.product import Product
from bakery.domain.repository.unit_of_work import UnitOfWork


class SetStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_name: str, quantity: int) -> Product:
        """Set the stock level for a product."""
        with self._uow as uow:
            product = uow.products.get_by_name(product_name)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{product_name}'")

            product.set_stock(quantity)
            uow.products.save(product)
            uow.commit()

        return product
