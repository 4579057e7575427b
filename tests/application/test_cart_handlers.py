"""Integration tests for the cart use cases."""

from decimal import Decimal

import pytest

from bakery.application.add_to_cart import AddToCartHandler
from bakery.application.remove_cart_item import RemoveCartItemHandler
from bakery.application.show_cart import ShowCartHandler
from bakery.application.update_cart_item import UpdateCartItemHandler
from bakery.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def _setup() -> FakeUnitOfWork:
    return FakeUnitOfWork(
        products=[
            Product(id=1, name="Sourdough", price=Money.of("150.00"), stock_quantity=5),
            Product(id=2, name="Baguette", price=Money.of("80.00"), stock_quantity=1),
        ]
    )


class TestAddToCart:

    def test_creates_entry(self):
        uow = _setup()
        line = AddToCartHandler(uow).handle(1, product_id=1, quantity=2)
        assert line.id == 1
        assert line.quantity == 2
        assert line.subtotal == Decimal("300.00")

    def test_same_product_increments(self):
        uow = _setup()
        handler = AddToCartHandler(uow)
        handler.handle(1, product_id=1)
        line = handler.handle(1, product_id=1, quantity=2)
        assert line.quantity == 3
        assert len(uow.carts.list_for_owner(1)) == 1

    def test_above_stock_rejected(self):
        uow = _setup()
        handler = AddToCartHandler(uow)
        handler.handle(1, product_id=2)
        with pytest.raises(InsufficientStockError, match="Baguette"):
            handler.handle(1, product_id=2)
        assert uow.carts.find_by_product(1, 2).quantity.value == 1

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            AddToCartHandler(_setup()).handle(1, product_id=9)

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            AddToCartHandler(_setup()).handle(1, product_id=1, quantity=0)


class TestUpdateCartItem:

    def test_sets_quantity(self):
        uow = _setup()
        AddToCartHandler(uow).handle(1, product_id=1)
        line = UpdateCartItemHandler(uow).handle(1, entry_id=1, quantity=4)
        assert line.quantity == 4

    def test_zero_removes_entry(self):
        uow = _setup()
        AddToCartHandler(uow).handle(1, product_id=1)
        assert UpdateCartItemHandler(uow).handle(1, entry_id=1, quantity=0) is None
        assert uow.carts.list_for_owner(1) == []

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            UpdateCartItemHandler(_setup()).handle(1, entry_id=1, quantity=-1)

    def test_foreign_entry_not_found(self):
        uow = _setup()
        AddToCartHandler(uow).handle(1, product_id=1)
        with pytest.raises(EntityNotFoundError, match="Cart item not found"):
            UpdateCartItemHandler(uow).handle(2, entry_id=1, quantity=2)

    def test_above_stock_rejected(self):
        uow = _setup()
        AddToCartHandler(uow).handle(1, product_id=1)
        with pytest.raises(InsufficientStockError, match="Available: 5"):
            UpdateCartItemHandler(uow).handle(1, entry_id=1, quantity=6)


class TestRemoveAndShowCart:

    def test_remove(self):
        uow = _setup()
        AddToCartHandler(uow).handle(1, product_id=1)
        RemoveCartItemHandler(uow).handle(1, entry_id=1)
        assert uow.carts.list_for_owner(1) == []

    def test_remove_foreign_not_found(self):
        uow = _setup()
        AddToCartHandler(uow).handle(1, product_id=1)
        with pytest.raises(EntityNotFoundError):
            RemoveCartItemHandler(uow).handle(2, entry_id=1)

    def test_show_totals(self):
        uow = _setup()
        AddToCartHandler(uow).handle(1, product_id=1, quantity=2)
        AddToCartHandler(uow).handle(1, product_id=2)

        cart = ShowCartHandler(uow).handle(1)

        assert [line.product.name for line in cart.items] == ["Sourdough", "Baguette"]
        assert cart.total == Decimal("380.00")

    def test_show_empty(self):
        cart = ShowCartHandler(_setup()).handle(1)
        assert cart.items == []
        assert cart.total == Decimal("0.00")
