"""
Create Basket Command
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from basket.application.dto.cart_dto import CartDTO
from basket.domain.entities.shopping_cart import ShoppingCart
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateBasketCommand(BaseCommand):
    """
    Command to open an empty cart.

    Attributes:
        user_name: Owner of the cart
        session_id: Optional anonymous session id
    """
    user_name: str
    session_id: Optional[str] = None


class CreateBasketHandler(CommandHandler[CreateBasketCommand, CartDTO]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: CreateBasketCommand) -> CartDTO:
        cart = ShoppingCart.create(user_name=command.user_name, session_id=command.session_id)

        async with self.uow:
            self.uow.carts.add(cart)
            await self.uow.commit()

        logger.info("Shopping cart created", cart_id=str(cart.id), user_name=cart.user_name)
        return CartDTO.from_entity(cart)
