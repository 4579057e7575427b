"""Pydantic request and response models for the HTTP API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from bakery.application.dto import (
    CartDTO,
    CartLineDTO,
    OrderDTO,
    OrderStatusDTO,
    ProductDTO,
    ProductSummaryDTO,
)
from bakery.domain.model.order import PaymentMethod, ShippingMethod

# --- Requests ---


class CreateOrderRequest(BaseModel):
    payment_method: PaymentMethod
    shipping_method: ShippingMethod
    shipping_address: str = Field(min_length=1)
    address_id: Optional[int] = None
    cart_item_ids: Optional[list[int]] = None


class AddToCartRequest(BaseModel):
    bread_id: int
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=0)


# --- Responses ---


class BreadSchema(BaseModel):
    id: int
    name: str
    price: float
    stock_quantity: int
    image: Optional[str] = None
    description: str = ""

    @staticmethod
    def from_dto(dto: ProductDTO) -> BreadSchema:
        return BreadSchema(
            id=dto.id,
            name=dto.name,
            price=float(dto.price),
            stock_quantity=dto.stock_quantity,
            image=dto.image,
            description=dto.description,
        )


class ProductSummarySchema(BaseModel):
    id: int
    name: str
    image: Optional[str] = None

    @staticmethod
    def from_dto(dto: ProductSummaryDTO) -> ProductSummarySchema:
        return ProductSummarySchema(id=dto.id, name=dto.name, image=dto.image)


class OrderItemSchema(BaseModel):
    id: Optional[int] = None
    bread: ProductSummarySchema
    quantity: int
    price: float
    subtotal: float


class OrderSchema(BaseModel):
    id: int
    user_id: int
    status: str
    total_amount: float
    payment_method: str
    payment_status: str
    shipping_method: str
    shipping_address: str
    items_count: int
    items: list[OrderItemSchema]
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderSchema:
        return OrderSchema(
            id=dto.id,
            user_id=dto.owner_id,
            status=dto.status,
            total_amount=float(dto.total_amount),
            payment_method=dto.payment_method,
            payment_status=dto.payment_status,
            shipping_method=dto.shipping_method,
            shipping_address=dto.shipping_address,
            items_count=dto.items_count,
            items=[
                OrderItemSchema(
                    id=item.id,
                    bread=ProductSummarySchema.from_dto(item.product),
                    quantity=item.quantity,
                    price=float(item.price),
                    subtotal=float(item.subtotal),
                )
                for item in dto.items
            ],
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class OrderCreatedResponse(BaseModel):
    message: str
    order: OrderSchema


class OrderStatusSchema(BaseModel):
    id: int
    status: str

    @staticmethod
    def from_dto(dto: OrderStatusDTO) -> OrderStatusSchema:
        return OrderStatusSchema(id=dto.id, status=dto.status)


class OrderCancelledResponse(BaseModel):
    message: str
    order: OrderStatusSchema


class CartLineSchema(BaseModel):
    id: int
    bread: ProductSummarySchema
    price: float
    quantity: int
    stock_quantity: int
    subtotal: float

    @staticmethod
    def from_dto(dto: CartLineDTO) -> CartLineSchema:
        return CartLineSchema(
            id=dto.id,
            bread=ProductSummarySchema.from_dto(dto.product),
            price=float(dto.price),
            quantity=dto.quantity,
            stock_quantity=dto.stock_quantity,
            subtotal=float(dto.subtotal),
        )


class CartSchema(BaseModel):
    items: list[CartLineSchema]
    total: float

    @staticmethod
    def from_dto(dto: CartDTO) -> CartSchema:
        return CartSchema(
            items=[CartLineSchema.from_dto(line) for line in dto.items],
            total=float(dto.total),
        )


class MessageResponse(BaseModel):
    message: str
