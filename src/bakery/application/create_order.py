"""Application service: Create Order use case.

Turns a selection of the shopper's cart into a pending order. This is the
only place that coordinates every aggregate at once (cart entries,
products, addresses, orders), and it does so inside a single unit of work:
either the order exists, stock is deducted and the consumed cart entries
are gone, or none of that happened.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

import structlog

from bakery.application.dto import CheckoutRequest, OrderDTO
from bakery.domain.exceptions import (
    DomainException,
    OrderProcessingError,
    ValidationError,
)
from bakery.domain.model.order import Order, PaymentMethod, ShippingMethod
from bakery.domain.repository.unit_of_work import UnitOfWork
from bakery.domain.service.stock_allocation_service import StockAllocationService

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Enum)


def parse_choice(enum_cls: type[E], value: str, field_name: str) -> E:
    """Map a submitted string onto one of *enum_cls*'s values."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"Invalid {field_name} '{value}'. Expected one of: {allowed}"
        ) from None


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int, request: CheckoutRequest) -> OrderDTO:
        """Place an order for *owner_id* from their cart.

        Steps:
        1. Validate the enumerated choices and the raw address.
        2. Resolve the saved address, falling back to the raw one.
        3. Load the selected cart entries, scoped to the owner.
        4. Check stock for every entry before writing anything.
        5. Write order, items, stock and cart changes; commit.
        """
        payment_method = parse_choice(
            PaymentMethod, request.payment_method, "payment_method"
        )
        shipping_method = parse_choice(
            ShippingMethod, request.shipping_method, "shipping_method"
        )
        if not request.shipping_address or not request.shipping_address.strip():
            raise ValidationError("Shipping address is required")

        try:
            with self._uow as uow:
                order = self._place(
                    uow, owner_id, request, payment_method, shipping_method
                )
        except DomainException:
            raise
        except Exception as exc:
            # Also covers an unreadable store when the unit of work opens.
            logger.exception(
                "Order creation failed", owner_id=owner_id, error=str(exc)
            )
            raise OrderProcessingError("Failed to create order") from exc

        logger.info(
            "Order placed",
            owner_id=owner_id,
            order_id=order.id,
            total_amount=str(order.total_amount.amount),
            items_count=order.items_count,
        )
        return OrderDTO.from_order(order)

    # --- Internal helpers -----------------------------------------------------

    def _place(
        self,
        uow: UnitOfWork,
        owner_id: int,
        request: CheckoutRequest,
        payment_method: PaymentMethod,
        shipping_method: ShippingMethod,
    ) -> Order:
        shipping_address = self._resolve_address(uow, owner_id, request)

        entries = uow.carts.list_for_owner(owner_id, request.cart_item_ids or None)
        if not entries:
            raise ValidationError("No items selected")

        stock = StockAllocationService(uow.products)
        try:
            allocations = stock.check_availability(entries)
        except DomainException as exc:
            logger.warning("Checkout rejected", owner_id=owner_id, reason=str(exc))
            raise

        items = stock.allocate(allocations)
        order = Order.place(
            owner_id=owner_id,
            items=items,
            payment_method=payment_method,
            shipping_method=shipping_method,
            shipping_address=shipping_address,
        )
        uow.orders.save(order)
        uow.carts.delete_many([entry.id for entry in entries])  # type: ignore[misc]
        uow.commit()
        return order

    @staticmethod
    def _resolve_address(
        uow: UnitOfWork, owner_id: int, request: CheckoutRequest
    ) -> str:
        """Saved address text if the reference is the owner's, else the raw input."""
        if request.address_id is None:
            return request.shipping_address
        address = uow.addresses.get_for_owner(request.address_id, owner_id)
        if address is None:
            logger.info(
                "Address reference not resolved, using submitted address",
                owner_id=owner_id,
                address_id=request.address_id,
            )
            return request.shipping_address
        return address.formatted()
