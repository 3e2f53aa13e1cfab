"""
Update Item Price In Basket Command
Reconciles cart price copies after a catalog price change
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from basket.domain.exceptions import InvalidCartItemError
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateItemPriceInBasketCommand(BaseCommand):
    """
    Command to overwrite the price copies of one product in every cart.

    Attributes:
        product_id: Catalog product UUID
        new_price: Latest catalog price, must be positive
        product_name: Latest catalog name, copied too when given
    """
    product_id: UUID
    new_price: Decimal
    product_name: Optional[str] = None


class UpdateItemPriceInBasketHandler(CommandHandler[UpdateItemPriceInBasketCommand, int]):
    """
    Handler for UpdateItemPriceInBasketCommand.

    Idempotent: replaying the same command rewrites the same values.

    Returns:
        Number of cart lines updated (0 when no cart holds the product)

    Raises:
        InvalidCartItemError: If the price is not positive
    """

    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: UpdateItemPriceInBasketCommand) -> int:
        if command.new_price <= 0:
            raise InvalidCartItemError(
                "Price must be greater than zero.",
                details={"product_id": str(command.product_id), "price": str(command.new_price)},
            )

        async with self.uow:
            updated = await self.uow.carts.update_item_prices(
                command.product_id,
                command.new_price,
                at=self.uow.now(),
                product_name=command.product_name,
            )
            await self.uow.commit()

        logger.info(
            "Cart prices reconciled",
            product_id=str(command.product_id),
            new_price=str(command.new_price),
            updated=updated,
        )
        return updated
