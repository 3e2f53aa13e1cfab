"""
Get Baskets By Product Query
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.application.base_query import BaseQuery
from shared.application.query_handler import QueryHandler
from basket.application.dto.cart_dto import CartLineDTO
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork


@dataclass(frozen=True)
class GetBasketsByProductQuery(BaseQuery):
    """
    Query for every cart line holding a product.

    Attributes:
        product_id: Catalog product UUID
    """
    product_id: UUID


class GetBasketsByProductHandler(QueryHandler[GetBasketsByProductQuery, list[CartLineDTO]]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetBasketsByProductQuery) -> list[CartLineDTO]:
        async with self.uow:
            rows = await self.uow.carts.lines_for_product(query.product_id)
            return [CartLineDTO.from_row(row) for row in rows]
