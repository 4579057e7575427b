"""Application service: List Products use case (query)."""

from __future__ import annotations

from bakery.application.dto import ProductDTO
from bakery.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, query: str | None = None) -> list[ProductDTO]:
        """Return the catalog, optionally narrowed to names containing *query*.

        Matching is case-insensitive; a blank query lists everything.
        """
        needle = (query or "").strip().lower()
        with self._uow as uow:
            products = uow.products.list_all()
        if needle:
            products = [p for p in products if needle in p.name.lower()]
        return [ProductDTO.from_product(p) for p in sorted(products, key=lambda p: p.id)]
