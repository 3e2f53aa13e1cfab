"""
Shopping Cart Routes
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import Query, Response, status

from shared.api.base_router import create_api_router
from shared.api.dependencies import MediatorDep
from basket.api.schemas.cart_schemas import (
    AddCartItemRequest,
    ApplyCartDiscountRequest,
    CartLineResponse,
    CartResponse,
    CreateCartRequest,
    UpdateCartItemQuantityRequest,
)
from basket.application.commands import (
    AddItemToBasketCommand,
    ApplyBasketDiscountCommand,
    CheckoutBasketCommand,
    ClearBasketCommand,
    CreateBasketCommand,
    DeleteBasketCommand,
    RemoveItemFromBasketCommand,
    UpdateItemQuantityCommand,
)
from basket.application.queries import GetBasketQuery, GetBasketsByProductQuery, GetBasketsForUserQuery

router = create_api_router(prefix="/basket/carts", tags=["Basket"])


@router.post(
    "",
    response_model=CartResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Cart",
)
async def create_cart(body: CreateCartRequest, mediator: MediatorDep) -> CartResponse:
    dto = await mediator.send(CreateBasketCommand(user_name=body.user_name, session_id=body.session_id))
    return CartResponse.model_validate(dto)


@router.get("", response_model=list[CartResponse], summary="List Carts Of A User")
async def list_carts(
    mediator: MediatorDep,
    user_name: str = Query(..., min_length=1, max_length=100),
    active_only: bool = Query(False),
) -> list[CartResponse]:
    carts = await mediator.send(GetBasketsForUserQuery(user_name=user_name, active_only=active_only))
    return [CartResponse.model_validate(cart) for cart in carts]


@router.get("/by-product/{product_id}", response_model=list[CartLineResponse], summary="Cart Lines Holding A Product")
async def list_cart_lines_for_product(product_id: UUID, mediator: MediatorDep) -> list[CartLineResponse]:
    lines = await mediator.send(GetBasketsByProductQuery(product_id=product_id))
    return [CartLineResponse.model_validate(line) for line in lines]


@router.get("/{cart_id}", response_model=CartResponse, summary="Get Cart")
async def get_cart(cart_id: UUID, mediator: MediatorDep) -> CartResponse:
    dto = await mediator.send(GetBasketQuery(cart_id=cart_id))
    return CartResponse.model_validate(dto)


@router.delete("/{cart_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Cart")
async def delete_cart(cart_id: UUID, mediator: MediatorDep) -> Response:
    await mediator.send(DeleteBasketCommand(cart_id=cart_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{cart_id}/items", response_model=CartResponse, summary="Add Item")
async def add_cart_item(cart_id: UUID, body: AddCartItemRequest, mediator: MediatorDep) -> CartResponse:
    dto = await mediator.send(
        AddItemToBasketCommand(
            cart_id=cart_id,
            product_id=body.product_id,
            product_name=body.product_name,
            price=body.price,
            quantity=body.quantity,
            variant=body.variant,
        )
    )
    return CartResponse.model_validate(dto)


@router.put("/{cart_id}/items/{product_id}", response_model=CartResponse, summary="Update Item Quantity")
async def update_cart_item_quantity(
    cart_id: UUID, product_id: UUID, body: UpdateCartItemQuantityRequest, mediator: MediatorDep
) -> CartResponse:
    dto = await mediator.send(
        UpdateItemQuantityCommand(
            cart_id=cart_id,
            product_id=product_id,
            quantity=body.quantity,
            variant=body.variant,
        )
    )
    return CartResponse.model_validate(dto)


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse, summary="Remove Item")
async def remove_cart_item(
    cart_id: UUID,
    product_id: UUID,
    mediator: MediatorDep,
    variant: Optional[str] = Query(None, max_length=50),
) -> CartResponse:
    dto = await mediator.send(RemoveItemFromBasketCommand(cart_id=cart_id, product_id=product_id, variant=variant))
    return CartResponse.model_validate(dto)


@router.post("/{cart_id}/discounts", response_model=CartResponse, summary="Apply Discount")
async def apply_cart_discount(cart_id: UUID, body: ApplyCartDiscountRequest, mediator: MediatorDep) -> CartResponse:
    dto = await mediator.send(
        ApplyBasketDiscountCommand(
            cart_id=cart_id,
            code=body.code,
            discount_type=body.discount_type,
            value=body.value,
        )
    )
    return CartResponse.model_validate(dto)


@router.post("/{cart_id}/clear", response_model=CartResponse, summary="Clear Cart")
async def clear_cart(cart_id: UUID, mediator: MediatorDep) -> CartResponse:
    dto = await mediator.send(ClearBasketCommand(cart_id=cart_id))
    return CartResponse.model_validate(dto)


@router.post("/{cart_id}/checkout", response_model=CartResponse, summary="Checkout Cart")
async def checkout_cart(cart_id: UUID, mediator: MediatorDep) -> CartResponse:
    dto = await mediator.send(CheckoutBasketCommand(cart_id=cart_id))
    return CartResponse.model_validate(dto)
