"""
Basket Unit of Work
Transactional access to the basket schema
"""
from __future__ import annotations

from typing import Optional

from shared.exceptions import UnitOfWorkError
from shared.infrastructure.database.sqlalchemy_unit_of_work import SQLAlchemyUnitOfWork
from basket.infrastructure.persistence.repositories.shopping_cart_repository import ShoppingCartRepository


class BasketUnitOfWork(SQLAlchemyUnitOfWork):
    """
    Unit of Work for the Basket module.

    Usage:
        async with uow:
            cart = await uow.carts.get(cart_id)
            cart.add_item(product_id, 2, Decimal("9.99"), "Mug")
            await uow.commit()
    """

    _carts: Optional[ShoppingCartRepository] = None

    def _reset_repositories(self) -> None:
        self._carts = None

    @property
    def carts(self) -> ShoppingCartRepository:
        if self.session is None:
            raise UnitOfWorkError("Unit of work used outside of 'async with'")
        if self._carts is None:
            self._carts = ShoppingCartRepository(self.session, self.tracker)
        return self._carts
