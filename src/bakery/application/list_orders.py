"""Application service: List Orders use case (query)."""

from __future__ import annotations

from bakery.application.dto import OrderDTO
from bakery.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int) -> list[OrderDTO]:
        """Return the owner's orders, newest first."""
        with self._uow as uow:
            orders = uow.orders.list_for_owner(owner_id)
        return [OrderDTO.from_order(order) for order in orders]
