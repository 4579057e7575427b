"""Application service: Complete Order use case (staff side).

Marks a pending order as handed over. Stock was already deducted when
the order was placed, so nothing else changes.
"""

from __future__ import annotations

import structlog

from bakery.application.dto import OrderStatusDTO
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class CompleteOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderStatusDTO:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            order.complete()
            uow.orders.save(order)
            uow.commit()

        logger.info("Order completed", order_id=order_id)
        return OrderStatusDTO(id=order.id, status=order.status.value)  # type: ignore[arg-type]
