"""FastAPI application exposing orders and the cart over JSON.

Identity resolution happens upstream; by the time a request gets here the
authenticated shopper is named by the ``X-User-Id`` header.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bakery.application.add_to_cart import AddToCartHandler
from bakery.application.cancel_order import CancelOrderHandler
from bakery.application.create_order import CreateOrderHandler
from bakery.application.delete_product import DeleteProductHandler
from bakery.application.dto import CheckoutRequest
from bakery.application.list_orders import ListOrdersHandler
from bakery.application.list_products import ListProductsHandler
from bakery.application.remove_cart_item import RemoveCartItemHandler
from bakery.application.show_cart import ShowCartHandler
from bakery.application.show_order import ShowOrderHandler
from bakery.application.show_product import ShowProductHandler
from bakery.application.update_cart_item import UpdateCartItemHandler
from bakery.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    OrderProcessingError,
    ValidationError,
)
from bakery.domain.repository.unit_of_work import UnitOfWork
from bakery.infrastructure.api.schemas import (
    AddToCartRequest,
    BreadSchema,
    CartLineSchema,
    CartSchema,
    CreateOrderRequest,
    MessageResponse,
    OrderCancelledResponse,
    OrderCreatedResponse,
    OrderSchema,
    OrderStatusSchema,
    UpdateCartItemRequest,
)

# Most specific first; the first isinstance match wins.
ERROR_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, 404),
    (ValidationError, 400),
    (OrderProcessingError, 500),
]


def status_code_for(exc: DomainException) -> int:
    for exc_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def current_user_id(x_user_id: Optional[int] = Header(default=None)) -> int:
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Unauthenticated")
    return x_user_id


def create_app(uow_factory: Callable[[], UnitOfWork]) -> FastAPI:
    app = FastAPI(
        title="Bakery Orders API",
        description="Cart checkout and order management for the bakery storefront",
    )

    # --- Error handling ---

    @app.exception_handler(DomainException)
    async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
        """Map DomainException subclasses to appropriate HTTP responses."""
        return JSONResponse(
            status_code=status_code_for(exc),
            content={"message": str(exc), "error_type": type(exc).__name__},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = {
            ".".join(str(part) for part in err["loc"] if part != "body"): err["msg"]
            for err in exc.errors()
        }
        return JSONResponse(
            status_code=400,
            content={
                "message": "Validation failed",
                "error_type": "ValidationError",
                "errors": errors,
            },
        )

    # --- Orders ---

    @app.post("/orders", response_model=OrderCreatedResponse, status_code=201)
    def create_order(
        body: CreateOrderRequest, user_id: int = Depends(current_user_id)
    ) -> OrderCreatedResponse:
        request = CheckoutRequest(
            payment_method=body.payment_method.value,
            shipping_method=body.shipping_method.value,
            shipping_address=body.shipping_address,
            address_id=body.address_id,
            cart_item_ids=body.cart_item_ids or [],
        )
        dto = CreateOrderHandler(uow_factory()).handle(user_id, request)
        return OrderCreatedResponse(
            message="Order placed successfully", order=OrderSchema.from_dto(dto)
        )

    @app.get("/orders", response_model=list[OrderSchema])
    def list_orders(user_id: int = Depends(current_user_id)) -> list[OrderSchema]:
        dtos = ListOrdersHandler(uow_factory()).handle(user_id)
        return [OrderSchema.from_dto(dto) for dto in dtos]

    @app.get("/orders/{order_id}", response_model=OrderSchema)
    def get_order(order_id: int, user_id: int = Depends(current_user_id)) -> OrderSchema:
        dto = ShowOrderHandler(uow_factory()).handle(user_id, order_id)
        return OrderSchema.from_dto(dto)

    @app.put("/orders/{order_id}/cancel", response_model=OrderCancelledResponse)
    def cancel_order(
        order_id: int, user_id: int = Depends(current_user_id)
    ) -> OrderCancelledResponse:
        dto = CancelOrderHandler(uow_factory()).handle(user_id, order_id)
        return OrderCancelledResponse(
            message="Order cancelled successfully",
            order=OrderStatusSchema.from_dto(dto),
        )

    # --- Catalog ---

    @app.get("/breads", response_model=list[BreadSchema])
    def list_breads(q: Optional[str] = Query(default=None)) -> list[BreadSchema]:
        dtos = ListProductsHandler(uow_factory()).handle(q)
        return [BreadSchema.from_dto(dto) for dto in dtos]

    @app.get("/breads/{bread_id}", response_model=BreadSchema)
    def get_bread(bread_id: int) -> BreadSchema:
        return BreadSchema.from_dto(ShowProductHandler(uow_factory()).handle(bread_id))

    @app.delete(
        "/breads/{bread_id}",
        response_model=MessageResponse,
        dependencies=[Depends(current_user_id)],
    )
    def delete_bread(bread_id: int) -> MessageResponse:
        DeleteProductHandler(uow_factory()).handle(bread_id)
        return MessageResponse(message="Bread deleted successfully")

    # --- Cart ---

    @app.get("/cart", response_model=CartSchema)
    def show_cart(user_id: int = Depends(current_user_id)) -> CartSchema:
        return CartSchema.from_dto(ShowCartHandler(uow_factory()).handle(user_id))

    @app.post("/cart", response_model=CartLineSchema, status_code=201)
    def add_to_cart(
        body: AddToCartRequest, user_id: int = Depends(current_user_id)
    ) -> CartLineSchema:
        line = AddToCartHandler(uow_factory()).handle(user_id, body.bread_id, body.quantity)
        return CartLineSchema.from_dto(line)

    @app.put("/cart/{entry_id}", response_model=Union[CartLineSchema, MessageResponse])
    def update_cart_item(
        entry_id: int,
        body: UpdateCartItemRequest,
        user_id: int = Depends(current_user_id),
    ) -> Union[CartLineSchema, MessageResponse]:
        line = UpdateCartItemHandler(uow_factory()).handle(user_id, entry_id, body.quantity)
        if line is None:
            return MessageResponse(message="Item removed from cart")
        return CartLineSchema.from_dto(line)

    @app.delete("/cart/{entry_id}", response_model=MessageResponse)
    def remove_cart_item(
        entry_id: int, user_id: int = Depends(current_user_id)
    ) -> MessageResponse:
        RemoveCartItemHandler(uow_factory()).handle(user_id, entry_id)
        return MessageResponse(message="Item removed from cart")

    return app
