"""
Product Repository
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import String, cast, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.infrastructure.database.change_tracker import ChangeTracker
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyAggregateRepository
from catalog.domain.entities.product import Product
from catalog.infrastructure.mappers.product_mapper import ProductMapper
from catalog.infrastructure.persistence.models.product_model import ProductModel


class ProductRepository(SQLAlchemyAggregateRepository[Product, ProductModel]):
    """
    Product collection of the catalog unit of work.

    Soft-deleted products are invisible unless ``include_deleted`` is set.
    """

    def __init__(self, session: AsyncSession, tracker: ChangeTracker) -> None:
        super().__init__(session, tracker, ProductMapper(), Product)

    async def get(self, aggregate_id: UUID, include_deleted: bool = False) -> Optional[Product]:
        product = await super().get(aggregate_id)
        if product is None or (product.is_deleted and not include_deleted):
            return None
        return product

    async def list_page(
        self,
        page: int = 1,
        page_size: int = 20,
        category: Optional[str] = None,
    ) -> tuple[list[Product], int]:
        """
        Page through active products ordered by name.

        Args:
            page: 1-indexed page number
            page_size: Products per page
            category: Optional category filter (case-insensitive)

        Returns:
            (products on the page, total matching products)
        """
        conditions = [ProductModel.is_deleted.is_(False)]
        if category:
            # categories are stored as a JSON array of strings
            conditions.append(
                cast(ProductModel.categories, String).icontains(f'"{category.strip()}"', autoescape=True)
            )

        total = await self.session.scalar(select(func.count()).select_from(ProductModel).where(*conditions))
        stmt = (
            select(ProductModel)
            .where(*conditions)
            .order_by(ProductModel.name, ProductModel.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        return await self._list(stmt), int(total or 0)
