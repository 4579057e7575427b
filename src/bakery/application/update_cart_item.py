"""Application service: Update Cart Item use case.

Setting the quantity to zero removes the entry.
"""

from __future__ import annotations

from bakery.application.dto import CartLineDTO
from bakery.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from bakery.domain.repository.unit_of_work import UnitOfWork


class UpdateCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int, entry_id: int, quantity: int) -> CartLineDTO | None:
        """Return the updated line, or None when the entry was removed."""
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        with self._uow as uow:
            entry = uow.carts.get_for_owner(entry_id, owner_id)
            if entry is None:
                raise EntityNotFoundError("Cart item not found")

            if quantity == 0:
                uow.carts.delete_many([entry_id])
                uow.commit()
                return None

            product = uow.products.get_by_id(entry.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{entry.product_id} not found")
            if not product.has_stock_for(quantity):
                raise InsufficientStockError(product.name, product.stock_quantity)

            entry.change_quantity(quantity)
            uow.carts.save(entry)
            uow.commit()

        return CartLineDTO.from_entry(entry, product)
