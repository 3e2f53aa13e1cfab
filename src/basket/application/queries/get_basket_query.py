"""
Get Basket Queries
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.application.base_query import BaseQuery
from shared.application.query_handler import QueryHandler
from basket.application.dto.cart_dto import CartDTO
from basket.domain.exceptions import CartNotFoundError
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork


@dataclass(frozen=True)
class GetBasketQuery(BaseQuery):
    cart_id: UUID


@dataclass(frozen=True)
class GetBasketsForUserQuery(BaseQuery):
    user_name: str
    active_only: bool = False


class GetBasketHandler(QueryHandler[GetBasketQuery, CartDTO]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetBasketQuery) -> CartDTO:
        async with self.uow:
            cart = await self.uow.carts.get(query.cart_id)
            if cart is None:
                raise CartNotFoundError(query.cart_id)
            return CartDTO.from_entity(cart)


class GetBasketsForUserHandler(QueryHandler[GetBasketsForUserQuery, list[CartDTO]]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetBasketsForUserQuery) -> list[CartDTO]:
        async with self.uow:
            carts = await self.uow.carts.list_for_user(query.user_name, active_only=query.active_only)
            return [CartDTO.from_entity(cart) for cart in carts]
