"""JSON-document-backed implementation of OrderRepository.

Items are stored nested inside their order record; they carry their own
IDs, unique across all orders.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Any

from bakery.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    ShippingMethod,
)
from bakery.domain.model.value_objects import Money, Quantity
from bakery.domain.repository.order_repository import OrderRepository
from bakery.infrastructure.persistence.json_document_store import next_id


class JsonOrderRepository(OrderRepository):

    def __init__(self, records: list[dict[str, Any]]) -> None:
        self._records = records

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._records:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_for_owner(self, order_id: int, owner_id: int) -> Order | None:
        for raw in self._records:
            if raw["id"] == order_id and raw["owner_id"] == owner_id:
                return self._to_domain(raw)
        return None

    def list_for_owner(self, owner_id: int) -> list[Order]:
        orders = [
            self._to_domain(raw) for raw in self._records if raw["owner_id"] == owner_id
        ]
        orders.sort(key=lambda o: (o.created_at, o.id), reverse=True)
        return orders

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = next_id(self._records)

        if any(item.id is None for item in order.items):
            item_id = self._next_item_id()
            assigned: list[OrderItem] = []
            for item in order.items:
                if item.id is None:
                    item = replace(item, id=item_id)
                    item_id += 1
                assigned.append(item)
            order.items = assigned

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(self._records):
            if raw["id"] == order.id:
                self._records[i] = self._to_raw(order)
                return
        self._records.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict[str, Any]:
        return {
            "id": order.id,
            "owner_id": order.owner_id,
            "status": order.status.value,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "payment_method": order.payment_method.value,
            "payment_status": order.payment_status.value,
            "shipping_method": order.shipping_method.value,
            "shipping_address": order.shipping_address,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "product_image": item.product_image,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "subtotal": str(item.subtotal.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Order:
        currency = raw.get("currency", "PHP")
        items = [
            OrderItem(
                id=i["id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                product_image=i.get("product_image"),
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), currency),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            owner_id=raw["owner_id"],
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            payment_method=PaymentMethod(raw["payment_method"]),
            payment_status=PaymentStatus(raw["payment_status"]),
            shipping_method=ShippingMethod(raw["shipping_method"]),
            shipping_address=raw["shipping_address"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- Internal helpers -----------------------------------------------------

    def _next_item_id(self) -> int:
        ids = [i["id"] for raw in self._records for i in raw["items"] if i.get("id")]
        return max(ids, default=0) + 1
