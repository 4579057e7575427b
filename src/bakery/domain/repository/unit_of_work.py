"""Abstract unit of work — the transaction boundary for every write.

Handlers open one with ``with uow:``, go through its repositories, and
call ``commit()`` on success. Leaving the block any other way, including
through an exception, rolls everything back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.repository.address_repository import AddressRepository
from bakery.domain.repository.cart_repository import CartRepository
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    carts: CartRepository
    products: ProductRepository
    orders: OrderRepository
    addresses: AddressRepository

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if not self._committed:
                self.rollback()
        finally:
            self._end()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made since the block was entered."""

    @abstractmethod
    def _begin(self) -> None:
        """Acquire the transactional handle and bind the repositories."""

    @abstractmethod
    def _commit(self) -> None:
        """Make every change since ``_begin`` durable, all at once."""

    def _end(self) -> None:
        """Release whatever ``_begin`` acquired."""
