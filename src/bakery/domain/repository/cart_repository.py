"""Abstract repository for shopper cart entries.

Every read is scoped to an owner: callers never get another
shopper's entries, whatever identifiers they pass in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.cart import CartEntry


class CartRepository(ABC):

    @abstractmethod
    def list_for_owner(
        self, owner_id: int, entry_ids: list[int] | None = None
    ) -> list[CartEntry]:
        """Return the owner's entries, restricted to *entry_ids* when given."""

    @abstractmethod
    def get_for_owner(self, entry_id: int, owner_id: int) -> CartEntry | None:
        """Return one of the owner's entries, or None."""

    @abstractmethod
    def find_by_product(self, owner_id: int, product_id: int) -> CartEntry | None:
        """Return the owner's entry for a product, or None."""

    @abstractmethod
    def save(self, entry: CartEntry) -> None:
        """Persist a new or updated entry, assigning an ID if needed."""

    @abstractmethod
    def delete_many(self, entry_ids: list[int]) -> None:
        """Delete the entries with the given IDs."""

    @abstractmethod
    def delete_for_product(self, product_id: int) -> int:
        """Delete every owner's entries for a product; return how many went."""
