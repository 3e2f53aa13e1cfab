"""
Apply Basket Discount Command
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from basket.application.commands._loading import load_cart
from basket.application.dto.cart_dto import CartDTO
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class ApplyBasketDiscountCommand(BaseCommand):
    """
    Command to apply (or replace) a discount code on a cart.

    Attributes:
        cart_id: Cart UUID
        code: Discount code; a later discount with the same code replaces it
        discount_type: "Percentage" or "Fixed"
        value: Percentage (0..100) or fixed amount (≥ 0)
    """
    cart_id: UUID
    code: str
    discount_type: str
    value: Decimal


class ApplyBasketDiscountHandler(CommandHandler[ApplyBasketDiscountCommand, CartDTO]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: ApplyBasketDiscountCommand) -> CartDTO:
        async with self.uow:
            cart = await load_cart(self.uow, command.cart_id)
            cart.apply_discount(command.code, command.discount_type, command.value)
            await self.uow.commit()

        logger.info(
            "Discount applied to cart",
            cart_id=str(cart.id),
            code=command.code,
            discount_amount=str(cart.discount_amount),
        )
        return CartDTO.from_entity(cart)
