"""
Cart Item Commands
Add, remove and re-quantify lines of an active cart
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from basket.application.commands._loading import load_cart
from basket.application.dto.cart_dto import CartDTO
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class AddItemToBasketCommand(BaseCommand):
    """
    Command to add a product to a cart.

    Attributes:
        cart_id: Cart UUID
        product_id: Catalog product UUID
        product_name: Name copied onto the line
        price: Unit price copied onto the line
        quantity: Units to add (> 0)
        variant: Optional variant key, e.g. a colour
    """
    cart_id: UUID
    product_id: UUID
    product_name: str
    price: Decimal
    quantity: int = 1
    variant: Optional[str] = None


@dataclass(frozen=True)
class RemoveItemFromBasketCommand(BaseCommand):
    cart_id: UUID
    product_id: UUID
    variant: Optional[str] = None


@dataclass(frozen=True)
class UpdateItemQuantityCommand(BaseCommand):
    cart_id: UUID
    product_id: UUID
    quantity: int
    variant: Optional[str] = None


class AddItemToBasketHandler(CommandHandler[AddItemToBasketCommand, CartDTO]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: AddItemToBasketCommand) -> CartDTO:
        async with self.uow:
            cart = await load_cart(self.uow, command.cart_id)
            cart.add_item(
                product_id=command.product_id,
                quantity=command.quantity,
                price=command.price,
                name=command.product_name,
                variant=command.variant,
            )
            await self.uow.commit()

        logger.info(
            "Item added to cart",
            cart_id=str(cart.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return CartDTO.from_entity(cart)


class RemoveItemFromBasketHandler(CommandHandler[RemoveItemFromBasketCommand, CartDTO]):
    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: RemoveItemFromBasketCommand) -> CartDTO:
        async with self.uow:
            cart = await load_cart(self.uow, command.cart_id)
            cart.remove_item(command.product_id, command.variant)
            await self.uow.commit()
            return CartDTO.from_entity(cart)


class UpdateItemQuantityHandler(CommandHandler[UpdateItemQuantityCommand, CartDTO]):
    """Sets a line's quantity; zero or less removes the line."""

    def __init__(self, uow: BasketUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: UpdateItemQuantityCommand) -> CartDTO:
        async with self.uow:
            cart = await load_cart(self.uow, command.cart_id)
            cart.update_item_quantity(command.product_id, command.quantity, command.variant)
            await self.uow.commit()
            return CartDTO.from_entity(cart)
