"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID regardless of owner, or None."""

    @abstractmethod
    def get_for_owner(self, order_id: int, owner_id: int) -> Order | None:
        """Return an order only if it belongs to *owner_id*, else None."""

    @abstractmethod
    def list_for_owner(self, owner_id: int) -> list[Order]:
        """Return the owner's orders, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning IDs to it and its items."""
