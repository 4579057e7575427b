"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from bakery.application.dto import CartDTO, CartLineDTO
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int) -> CartDTO:
        lines: list[CartLineDTO] = []
        subtotals: list[Money] = []

        with self._uow as uow:
            for entry in uow.carts.list_for_owner(owner_id):
                product = uow.products.get_by_id(entry.product_id)
                if product is None:
                    continue
                lines.append(CartLineDTO.from_entry(entry, product))
                subtotals.append(product.price * entry.quantity.value)

        return CartDTO(items=lines, total=Money.total(subtotals).amount)
