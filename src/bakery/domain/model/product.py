"""Product aggregate ("bread" in the storefront).

Products live independently of orders and carts. Their price can change
and their stock moves with every order placed or cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog, carrying its own stock level.

    Invariant: ``stock_quantity`` is never negative.
    """

    id: int | None
    name: str
    price: Money
    stock_quantity: int = 0
    image: str | None = None
    description: str = ""

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock_quantity

    def deduct_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock, never going below zero.

        Availability is checked before an order is written; the floor only
        matters if stock moved between that check and this call.
        """
        if quantity <= 0:
            raise ValidationError("Deduct quantity must be positive")
        self.stock_quantity = max(0, self.stock_quantity - quantity)

    def restore_stock(self, quantity: int) -> None:
        """Put *quantity* units back into stock (order cancellation)."""
        if quantity <= 0:
            raise ValidationError("Restore quantity must be positive")
        self.stock_quantity += quantity

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.stock_quantity = quantity

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because order items
        capture a price snapshot at creation time. Zero is a valid price
        (giveaways); Money itself rules out negatives.
        """
        self.price = new_price
