"""Integration tests for the ShowOrder and ListOrders queries."""

from datetime import datetime, timedelta, timezone

import pytest

from bakery.application.list_orders import ListOrdersHandler
from bakery.application.show_order import ShowOrderHandler
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.order import Order, OrderItem, PaymentMethod, ShippingMethod
from bakery.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeUnitOfWork


def _order(owner_id: int, minutes_ago: int, qty: int = 1) -> Order:
    order = Order.place(
        owner_id=owner_id,
        items=[
            OrderItem(
                product_id=1,
                product_name="Ensaymada",
                product_image="ensaymada.png",
                quantity=Quantity(qty),
                price=Money.of("45.00"),
            )
        ],
        payment_method=PaymentMethod.MAYA,
        shipping_method=ShippingMethod.SAME_DAY,
        shipping_address="Makati",
    )
    order.created_at = datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)
    return order


def _setup() -> FakeUnitOfWork:
    uow = FakeUnitOfWork()
    uow.orders.save(_order(owner_id=1, minutes_ago=30))         # id 1
    uow.orders.save(_order(owner_id=1, minutes_ago=5, qty=3))   # id 2
    uow.orders.save(_order(owner_id=2, minutes_ago=1))          # id 3
    return uow


class TestListOrders:

    def test_newest_first(self):
        dtos = ListOrdersHandler(_setup()).handle(1)
        assert [dto.id for dto in dtos] == [2, 1]

    def test_only_own_orders(self):
        dtos = ListOrdersHandler(_setup()).handle(2)
        assert [dto.id for dto in dtos] == [3]

    def test_items_count_and_summary(self):
        dto = ListOrdersHandler(_setup()).handle(1)[0]
        assert dto.items_count == 1
        assert dto.items[0].product.name == "Ensaymada"
        assert dto.items[0].quantity == 3

    def test_no_orders(self):
        assert ListOrdersHandler(_setup()).handle(99) == []


class TestShowOrder:

    def test_own_order(self):
        dto = ShowOrderHandler(_setup()).handle(1, 2)
        assert dto.id == 2
        assert dto.payment_method == "maya"
        assert dto.shipping_method == "same_day"

    def test_foreign_order_looks_missing(self):
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            ShowOrderHandler(_setup()).handle(1, 3)

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            ShowOrderHandler(_setup()).handle(1, 404)
