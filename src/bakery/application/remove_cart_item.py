"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.unit_of_work import UnitOfWork


class RemoveCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, owner_id: int, entry_id: int) -> None:
        with self._uow as uow:
            if uow.carts.get_for_owner(entry_id, owner_id) is None:
                raise EntityNotFoundError("Cart item not found")
            uow.carts.delete_many([entry_id])
            uow.commit()
