"""Abstract repository for saved shipping addresses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.address import Address


class AddressRepository(ABC):

    @abstractmethod
    def get_for_owner(self, address_id: int, owner_id: int) -> Address | None:
        """Return an address only if it belongs to *owner_id*, else None."""

    @abstractmethod
    def save(self, address: Address) -> None:
        """Persist a new or updated address, assigning an ID if needed."""
