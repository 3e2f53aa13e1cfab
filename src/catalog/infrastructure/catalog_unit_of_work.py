"""
Catalog Unit of Work
Transactional access to the catalog schema
"""
from __future__ import annotations

from typing import Optional

from shared.exceptions import UnitOfWorkError
from shared.infrastructure.database.sqlalchemy_unit_of_work import SQLAlchemyUnitOfWork
from catalog.infrastructure.persistence.repositories.product_repository import ProductRepository


class CatalogUnitOfWork(SQLAlchemyUnitOfWork):
    """
    Unit of Work for the Catalog module.

    Usage:
        async with uow:
            product = await uow.products.get(product_id)
            product.update_price(Decimal("80.00"), "sale")
            await uow.commit()
    """

    _products: Optional[ProductRepository] = None

    def _reset_repositories(self) -> None:
        self._products = None

    @property
    def products(self) -> ProductRepository:
        if self.session is None:
            raise UnitOfWorkError("Unit of work used outside of 'async with'")
        if self._products is None:
            self._products = ProductRepository(self.session, self.tracker)
        return self._products
