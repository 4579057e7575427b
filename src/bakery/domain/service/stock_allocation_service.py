"""Domain service: Stock Allocation.

Coordinates the cross-aggregate work of moving product stock when an
order is placed or cancelled. Lives in the domain layer because the
sufficiency rule is a core business rule, not just orchestration.

Placement is two-phase (validate-then-mutate) so a failure on one cart
entry never leaves stock partially deducted for the others.
"""

from __future__ import annotations

from bakery.domain.exceptions import InsufficientStockError, ValidationError
from bakery.domain.model.cart import CartEntry
from bakery.domain.model.order import Order, OrderItem
from bakery.domain.model.product import Product
from bakery.domain.repository.product_repository import ProductRepository


class StockAllocationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check_availability(
        self, entries: list[CartEntry]
    ) -> list[tuple[CartEntry, Product]]:
        """Phase 1: load every product and make sure it can cover its entry.

        Runs over all entries before anything is written; the first
        shortfall raises InsufficientStockError naming the product and
        what is left.
        """
        allocations: list[tuple[CartEntry, Product]] = []
        for entry in entries:
            product = self._product_repo.get_by_id(entry.product_id)
            if product is None:
                raise ValidationError(
                    f"Product #{entry.product_id} is no longer available"
                )
            if not product.has_stock_for(entry.quantity.value):
                raise InsufficientStockError(product.name, product.stock_quantity)
            allocations.append((entry, product))
        return allocations

    def allocate(self, allocations: list[tuple[CartEntry, Product]]) -> list[OrderItem]:
        """Phase 2: snapshot prices into order items and deduct stock."""
        items: list[OrderItem] = []
        for entry, product in allocations:
            items.append(
                OrderItem(
                    product_id=product.id,  # type: ignore[arg-type]
                    product_name=product.name,
                    product_image=product.image,
                    quantity=entry.quantity,
                    price=product.price,  # <-- price snapshot
                )
            )
            product.deduct_stock(entry.quantity.value)
            self._product_repo.save(product)
        return items

    def restore_for_order(self, order: Order) -> None:
        """Put every item's quantity back on its product.

        Products that were removed from the catalog since the order was
        placed have nothing to restore and are skipped.
        """
        for item in order.items:
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                continue
            product.restore_stock(item.quantity.value)
            self._product_repo.save(product)
