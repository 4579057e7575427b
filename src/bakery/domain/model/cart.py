"""CartEntry — one product a shopper intends to buy, not yet ordered."""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.model.value_objects import Quantity


@dataclass
class CartEntry:
    """A shopper's pending claim on a quantity of one product.

    Entries are deleted when an order consumes them, or when the shopper
    removes them (including setting the quantity to zero).
    """

    id: int | None
    owner_id: int
    product_id: int
    quantity: Quantity

    def change_quantity(self, quantity: int) -> None:
        self.quantity = Quantity(quantity)

    def add(self, quantity: int) -> None:
        self.quantity = Quantity(self.quantity.value + quantity)
