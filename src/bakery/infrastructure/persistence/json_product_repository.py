"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import Money
from bakery.domain.repository.product_repository import ProductRepository
from bakery.infrastructure.persistence.json_document_store import next_id


class JsonProductRepository(ProductRepository):

    def __init__(self, records: list[dict[str, Any]]) -> None:
        self._records = records

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._records:
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._records]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = next_id(self._records)

        for i, raw in enumerate(self._records):
            if raw["id"] == product.id:
                self._records[i] = self._to_raw(product)
                return
        self._records.append(self._to_raw(product))

    def delete(self, product_id: int) -> None:
        self._records[:] = [raw for raw in self._records if raw["id"] != product_id]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_quantity": product.stock_quantity,
            "image": product.image,
            "description": product.description,
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "PHP")),
            stock_quantity=raw.get("stock_quantity", 0),
            image=raw.get("image"),
            description=raw.get("description", ""),
        )
