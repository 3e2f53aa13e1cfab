"""
Shopping Cart Repository
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shared.infrastructure.database.change_tracker import ChangeTracker
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyAggregateRepository
from shared.infrastructure.observability.logger import get_logger
from basket.domain.entities.shopping_cart import CartStatus, ShoppingCart
from basket.infrastructure.mappers.shopping_cart_mapper import ShoppingCartMapper
from basket.infrastructure.persistence.models.basket_models import ShoppingCartItemModel, ShoppingCartModel

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartLineRow:
    """One cart line holding a given product, read without loading the aggregate."""

    cart_id: UUID
    user_name: str
    status: str
    quantity: int
    variant: Optional[str]
    product_price: Decimal
    unit_price: Decimal


class ShoppingCartRepository(SQLAlchemyAggregateRepository[ShoppingCart, ShoppingCartModel]):
    """
    Cart collection of the basket unit of work.

    Besides aggregate access it exposes two set-based operations keyed by
    product id: a read of every line holding the product and the bulk
    price reconciliation.
    """

    def __init__(self, session: AsyncSession, tracker: ChangeTracker) -> None:
        super().__init__(session, tracker, ShoppingCartMapper(), ShoppingCart)

    async def list_for_user(self, user_name: str, active_only: bool = False) -> list[ShoppingCart]:
        stmt = select(ShoppingCartModel).where(ShoppingCartModel.user_name == user_name)
        if active_only:
            stmt = stmt.where(ShoppingCartModel.status == CartStatus.ACTIVE.value)
        return await self._list(stmt.order_by(ShoppingCartModel.created_at, ShoppingCartModel.id))

    async def lines_for_product(self, product_id: UUID) -> list[CartLineRow]:
        stmt = (
            select(
                ShoppingCartItemModel.cart_id,
                ShoppingCartModel.user_name,
                ShoppingCartModel.status,
                ShoppingCartItemModel.quantity,
                ShoppingCartItemModel.variant,
                ShoppingCartItemModel.product_price,
                ShoppingCartItemModel.unit_price,
            )
            .join(ShoppingCartModel, ShoppingCartModel.id == ShoppingCartItemModel.cart_id)
            .where(ShoppingCartItemModel.product_id == product_id)
            .order_by(ShoppingCartModel.user_name, ShoppingCartItemModel.cart_id)
        )
        result = await self.session.execute(stmt)
        return [CartLineRow(*row) for row in result.all()]

    async def update_item_prices(
        self,
        product_id: UUID,
        price: Decimal,
        at: datetime,
        product_name: Optional[str] = None,
    ) -> int:
        """
        Overwrite the price copies of every line of ``product_id`` in every cart.

        Runs as one UPDATE inside the unit of work's transaction. Writing the
        same price twice leaves the rows as they were.

        Returns:
            Number of lines updated
        """
        values: dict[str, object] = {
            "product_price": price,
            "unit_price": price,
            "last_modified_at": at,
        }
        if product_name:
            values["product_name"] = product_name

        stmt = (
            update(ShoppingCartItemModel)
            .where(ShoppingCartItemModel.product_id == product_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        updated = result.rowcount or 0
        logger.debug(
            "Cart line prices reconciled",
            product_id=str(product_id),
            price=str(price),
            updated=updated,
        )
        return updated
