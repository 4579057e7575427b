"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items. Items and the total
are fixed when the order is placed; afterwards only ``status`` moves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentMethod(Enum):
    CASH_ON_DELIVERY = "cash_on_delivery"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PAYPAL = "paypal"
    GCASH = "gcash"
    MAYA = "maya"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"


class ShippingMethod(Enum):
    PICKUP = "pickup"
    STANDARD = "standard"
    EXPRESS = "express"
    SAME_DAY = "same_day"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderItem:
    """Captures the price snapshot of a product at order-creation time.

    Immutable: later price changes on the product never reach it.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    price: Money  # locked at order-creation time
    product_image: str | None = None
    id: int | None = None

    @property
    def subtotal(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for shopper orders.

    Use the ``Order.place()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    owner_id: int
    items: list[OrderItem]
    total_amount: Money
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    shipping_method: ShippingMethod
    shipping_address: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        owner_id: int,
        items: list[OrderItem],
        payment_method: PaymentMethod,
        shipping_method: ShippingMethod,
        shipping_address: str,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not items:
            raise ValidationError("No items selected")

        if not shipping_address or not shipping_address.strip():
            raise ValidationError("Shipping address is required")

        total = Money.total(item.subtotal for item in items)

        # No gateway is called; cash on delivery is the only unpaid method.
        if payment_method is PaymentMethod.CASH_ON_DELIVERY:
            payment_status = PaymentStatus.PENDING
        else:
            payment_status = PaymentStatus.PAID

        now = _utcnow()
        return Order(
            id=None,
            owner_id=owner_id,
            items=list(items),
            total_amount=total,
            payment_method=payment_method,
            payment_status=payment_status,
            shipping_method=shipping_method,
            shipping_address=shipping_address.strip(),
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def cancel(self) -> None:
        """Transition PENDING -> CANCELLED.

        Stock restoration must happen alongside this, inside the same
        unit of work (coordinated by the application handler).
        """
        if self.status != OrderStatus.PENDING:
            raise ValidationError("Only pending orders can be cancelled")
        self.status = OrderStatus.CANCELLED
        self.updated_at = _utcnow()

    def complete(self) -> None:
        """Transition PENDING -> COMPLETED (handed over to the shopper)."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot complete order — current status is {self.status.value}, "
                f"expected pending"
            )
        self.status = OrderStatus.COMPLETED
        self.updated_at = _utcnow()

    # --- Computed properties --------------------------------------------------

    @property
    def items_count(self) -> int:
        return len(self.items)
