"""Application service: Add To Cart use case.

Adding a product that is already in the cart bumps the existing entry
instead of creating a second one.
"""

from __future__ import annotations

from bakery.application.dto import CartLineDTO
from bakery.domain.exceptions import EntityNotFoundError, InsufficientStockError
from bakery.domain.model.cart import CartEntry
from bakery.domain.model.value_objects import Quantity
from bakery.domain.repository.unit_of_work import UnitOfWork


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int, product_id: int, quantity: int = 1) -> CartLineDTO:
        requested = Quantity(quantity)

        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")

            entry = uow.carts.find_by_product(owner_id, product_id)
            if entry is None:
                entry = CartEntry(
                    id=None, owner_id=owner_id, product_id=product_id, quantity=requested
                )
            else:
                entry.add(requested.value)

            if not product.has_stock_for(entry.quantity.value):
                raise InsufficientStockError(product.name, product.stock_quantity)

            uow.carts.save(entry)
            uow.commit()

        return CartLineDTO.from_entry(entry, product)
