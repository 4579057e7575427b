"""JSON-document-backed implementation of CartRepository."""

from __future__ import annotations

from typing import Any

from bakery.domain.model.cart import CartEntry
from bakery.domain.model.value_objects import Quantity
from bakery.domain.repository.cart_repository import CartRepository
from bakery.infrastructure.persistence.json_document_store import next_id


class JsonCartRepository(CartRepository):

    def __init__(self, records: list[dict[str, Any]]) -> None:
        self._records = records

    # --- CartRepository interface ---------------------------------------------

    def list_for_owner(
        self, owner_id: int, entry_ids: list[int] | None = None
    ) -> list[CartEntry]:
        wanted = set(entry_ids) if entry_ids else None
        return [
            self._to_domain(raw)
            for raw in self._records
            if raw["owner_id"] == owner_id and (wanted is None or raw["id"] in wanted)
        ]

    def get_for_owner(self, entry_id: int, owner_id: int) -> CartEntry | None:
        for raw in self._records:
            if raw["id"] == entry_id and raw["owner_id"] == owner_id:
                return self._to_domain(raw)
        return None

    def find_by_product(self, owner_id: int, product_id: int) -> CartEntry | None:
        for raw in self._records:
            if raw["owner_id"] == owner_id and raw["product_id"] == product_id:
                return self._to_domain(raw)
        return None

    def save(self, entry: CartEntry) -> None:
        if entry.id is None:
            entry.id = next_id(self._records)

        for i, raw in enumerate(self._records):
            if raw["id"] == entry.id:
                self._records[i] = self._to_raw(entry)
                return
        self._records.append(self._to_raw(entry))

    def delete_many(self, entry_ids: list[int]) -> None:
        doomed = set(entry_ids)
        self._records[:] = [raw for raw in self._records if raw["id"] not in doomed]

    def delete_for_product(self, product_id: int) -> int:
        before = len(self._records)
        self._records[:] = [
            raw for raw in self._records if raw["product_id"] != product_id
        ]
        return before - len(self._records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(entry: CartEntry) -> dict[str, Any]:
        return {
            "id": entry.id,
            "owner_id": entry.owner_id,
            "product_id": entry.product_id,
            "quantity": entry.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> CartEntry:
        return CartEntry(
            id=raw["id"],
            owner_id=raw["owner_id"],
            product_id=raw["product_id"],
            quantity=Quantity(raw["quantity"]),
        )
