"""
Get Products Query
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shared.application.base_query import BaseQuery
from shared.application.query_handler import QueryHandler
from shared.exceptions import ValidationError
from catalog.application.dto.product_dto import ProductDTO, ProductPageDTO
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class GetProductsQuery(BaseQuery):
    """
    Query to page through active products.

    Attributes:
        page: 1-indexed page number
        page_size: Items per page (1..100)
        category: Optional case-insensitive category filter
    """
    page: int = 1
    page_size: int = 20
    category: Optional[str] = None


class GetProductsHandler(QueryHandler[GetProductsQuery, ProductPageDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetProductsQuery) -> ProductPageDTO:
        if query.page < 1 or not 1 <= query.page_size <= MAX_PAGE_SIZE:
            raise ValidationError(
                "Invalid paging parameters.",
                details={"page": query.page, "page_size": query.page_size},
            )

        async with self.uow:
            products, total = await self.uow.products.list_page(
                page=query.page,
                page_size=query.page_size,
                category=query.category,
            )
            return ProductPageDTO(
                items=[ProductDTO.from_entity(p) for p in products],
                total=total,
                page=query.page,
                page_size=query.page_size,
            )
