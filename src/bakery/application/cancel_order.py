"""Application service: Cancel Order use case.

Only pending orders can be cancelled. Cancelling puts every item's
quantity back on its product and flips the status, in one unit of work.
Totals, payment status and items stay exactly as they were placed.
"""

from __future__ import annotations

import structlog

from bakery.application.dto import OrderStatusDTO
from bakery.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    OrderProcessingError,
)
from bakery.domain.repository.unit_of_work import UnitOfWork
from bakery.domain.service.stock_allocation_service import StockAllocationService

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int, order_id: int) -> OrderStatusDTO:
        try:
            with self._uow as uow:
                order = uow.orders.get_for_owner(order_id, owner_id)
                if order is None:
                    raise EntityNotFoundError("Order not found")

                # The status guard is what stops a second cancel from
                # restoring the same stock twice.
                order.cancel()

                StockAllocationService(uow.products).restore_for_order(order)
                uow.orders.save(order)
                uow.commit()
        except DomainException:
            raise
        except Exception as exc:
            logger.exception(
                "Order cancellation failed",
                owner_id=owner_id,
                order_id=order_id,
                error=str(exc),
            )
            raise OrderProcessingError("Failed to cancel order") from exc

        logger.info("Order cancelled", owner_id=owner_id, order_id=order_id)
        return OrderStatusDTO(id=order.id, status=order.status.value)  # type: ignore[arg-type]
