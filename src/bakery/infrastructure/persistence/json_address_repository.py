"""JSON-document-backed implementation of AddressRepository."""

from __future__ import annotations

from typing import Any

from bakery.domain.model.address import Address
from bakery.domain.repository.address_repository import AddressRepository
from bakery.infrastructure.persistence.json_document_store import next_id


class JsonAddressRepository(AddressRepository):

    def __init__(self, records: list[dict[str, Any]]) -> None:
        self._records = records

    def get_for_owner(self, address_id: int, owner_id: int) -> Address | None:
        for raw in self._records:
            if raw["id"] == address_id and raw["owner_id"] == owner_id:
                return Address(
                    id=raw["id"],
                    owner_id=raw["owner_id"],
                    text=raw["text"],
                    label=raw.get("label"),
                )
        return None

    def save(self, address: Address) -> None:
        if address.id is None:
            address.id = next_id(self._records)
        raw = {
            "id": address.id,
            "owner_id": address.owner_id,
            "text": address.text,
            "label": address.label,
        }
        for i, existing in enumerate(self._records):
            if existing["id"] == address.id:
                self._records[i] = raw
                return
        self._records.append(raw)
