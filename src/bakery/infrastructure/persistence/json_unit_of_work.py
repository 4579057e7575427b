"""Unit of work over the JSON document store.

Entering the block takes the store's exclusive lock and loads a private
copy of the document; repositories read and write that copy. ``commit``
writes it back in one atomic replace. Anything else throws it away.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import Any

from bakery.domain.repository.unit_of_work import UnitOfWork
from bakery.infrastructure.persistence.json_address_repository import (
    JsonAddressRepository,
)
from bakery.infrastructure.persistence.json_cart_repository import JsonCartRepository
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from bakery.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store
        self._document: dict[str, list[dict[str, Any]]] | None = None
        self._stack: ExitStack | None = None

    def _begin(self) -> None:
        self._stack = ExitStack()
        self._stack.enter_context(self._store.locked())
        try:
            self._document = self._store.load()
        except BaseException:
            self._stack.close()
            raise
        self.products = JsonProductRepository(self._document["products"])
        self.carts = JsonCartRepository(self._document["cart_items"])
        self.orders = JsonOrderRepository(self._document["orders"])
        self.addresses = JsonAddressRepository(self._document["addresses"])

    def _commit(self) -> None:
        if self._document is None:
            raise RuntimeError("commit() called outside of a unit of work")
        self._store.save(self._document)

    def rollback(self) -> None:
        self._document = None

    def _end(self) -> None:
        if self._stack is not None:
            self._stack.close()
            self._stack = None
