"""Application service: Show Order use case (query)."""

from __future__ import annotations

from bakery.application.dto import OrderDTO
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int, order_id: int) -> OrderDTO:
        # Ownership is part of the lookup, so a foreign order looks
        # exactly like a missing one.
        with self._uow as uow:
            order = uow.orders.get_for_owner(order_id, owner_id)
        if order is None:
            raise EntityNotFoundError("Order not found")
        return OrderDTO.from_order(order)
