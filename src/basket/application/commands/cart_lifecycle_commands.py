"""
Cart Lifecycle Commands
Clear, check out and delete a cart
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from basket.application.commands._loading import load_cart
from basket.application.dto.cart_dto import CartDTO
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClearBasketCommand(BaseCommand):
    cart_id: UUID


@dataclass(frozen=True)
class CheckoutBasketCommand(BaseCommand):
    cart_id: UUID


@dataclass(frozen=True)
class DeleteBasketCommand(BaseCommand):
    cart_id: UUID


class ClearBasketHandler(CommandHandler[ClearBasketCommand, CartDTO]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: ClearBasketCommand) -> CartDTO:
        async with self.uow:
            cart = await load_cart(self.uow, command.cart_id)
            cart.clear()
            await self.uow.commit()
            return CartDTO.from_entity(cart)


class CheckoutBasketHandler(CommandHandler[CheckoutBasketCommand, CartDTO]):
    """
    Handler for CheckoutBasketCommand.

    Raises:
        InvalidCartOperationError: Cart empty or already checked out
    """

    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: CheckoutBasketCommand) -> CartDTO:
        async with self.uow:
            cart = await load_cart(self.uow, command.cart_id)
            cart.checkout()
            await self.uow.commit()

        logger.info(
            "Shopping cart checked out",
            cart_id=str(cart.id),
            total=str(cart.total),
            item_count=cart.item_count,
        )
        return CartDTO.from_entity(cart)


class DeleteBasketHandler(CommandHandler[DeleteBasketCommand, None]):
    """Physically removes the cart with its lines and discounts."""

    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: DeleteBasketCommand) -> None:
        async with self.uow:
            cart = await load_cart(self.uow, command.cart_id)
            self.uow.carts.remove(cart)
            await self.uow.commit()

        logger.info("Shopping cart deleted", cart_id=str(command.cart_id))
