"""
Get Product By Id Query
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.application.base_query import BaseQuery
from shared.application.query_handler import QueryHandler
from catalog.application.dto.product_dto import ProductDTO
from catalog.domain.exceptions import ProductNotFoundError
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork


@dataclass(frozen=True)
class GetProductByIdQuery(BaseQuery):
    product_id: UUID
    include_deleted: bool = False


class GetProductByIdHandler(QueryHandler[GetProductByIdQuery, ProductDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetProductByIdQuery) -> ProductDTO:
        async with self.uow:
            product = await self.uow.products.get(query.product_id, include_deleted=query.include_deleted)
            if product is None:
                raise ProductNotFoundError(query.product_id)
            return ProductDTO.from_entity(product)
