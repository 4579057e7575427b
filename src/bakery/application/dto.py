"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bakery.domain.model.cart import CartEntry
from bakery.domain.model.order import Order
from bakery.domain.model.product import Product


@dataclass(frozen=True)
class CheckoutRequest:
    """Input: what the shopper submitted at checkout."""

    payment_method: str
    shipping_method: str
    shipping_address: str
    address_id: int | None = None
    cart_item_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class ProductSummaryDTO:
    id: int
    name: str
    image: str | None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as shown on the storefront."""

    id: int
    name: str
    price: Decimal
    stock_quantity: int
    image: str | None
    description: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=product.price.amount,
            stock_quantity=product.stock_quantity,
            image=product.image,
            description=product.description,
        )


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order item, with enough product data to render it."""

    id: int | None
    product: ProductSummaryDTO
    quantity: int
    price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the shopper."""

    id: int
    owner_id: int
    status: str
    total_amount: Decimal
    payment_method: str
    payment_status: str
    shipping_method: str
    shipping_address: str
    items: list[OrderItemDTO]
    created_at: datetime
    updated_at: datetime

    @property
    def items_count(self) -> int:
        return len(self.items)

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            owner_id=order.owner_id,
            status=order.status.value,
            total_amount=order.total_amount.amount,
            payment_method=order.payment_method.value,
            payment_status=order.payment_status.value,
            shipping_method=order.shipping_method.value,
            shipping_address=order.shipping_address,
            items=[
                OrderItemDTO(
                    id=item.id,
                    product=ProductSummaryDTO(
                        id=item.product_id,
                        name=item.product_name,
                        image=item.product_image,
                    ),
                    quantity=item.quantity.value,
                    price=item.price.amount,
                    subtotal=item.subtotal.amount,
                )
                for item in order.items
            ],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


@dataclass(frozen=True)
class OrderStatusDTO:
    """Output of a status transition: just the order and where it ended up."""

    id: int
    status: str


@dataclass(frozen=True)
class CartLineDTO:
    id: int
    product: ProductSummaryDTO
    price: Decimal
    quantity: int
    stock_quantity: int
    subtotal: Decimal

    @staticmethod
    def from_entry(entry: CartEntry, product: Product) -> CartLineDTO:
        return CartLineDTO(
            id=entry.id,  # type: ignore[arg-type]
            product=ProductSummaryDTO(
                id=product.id,  # type: ignore[arg-type]
                name=product.name,
                image=product.image,
            ),
            price=product.price.amount,
            quantity=entry.quantity.value,
            stock_quantity=product.stock_quantity,
            subtotal=(product.price * entry.quantity.value).amount,
        )


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: Decimal
