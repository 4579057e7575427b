"""Application service: Delete Product use case.

Removes a product from the catalog together with every cart entry that
still points at it. Placed orders keep their item snapshots; cancelling
one later simply has no stock to put back for this product.
"""

from __future__ import annotations

import structlog

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> None:
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            removed = uow.carts.delete_for_product(product_id)
            uow.products.delete(product_id)
            uow.commit()

        logger.info(
            "Product deleted",
            product_id=product_id,
            name=product.name,
            cart_entries_removed=removed,
        )
