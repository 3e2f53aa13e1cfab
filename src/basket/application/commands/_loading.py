"""
Shared loading helper for cart command handlers
"""
from __future__ import annotations

from uuid import UUID

from basket.domain.entities.shopping_cart import ShoppingCart
from basket.domain.exceptions import CartNotFoundError
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork


async def load_cart(uow: BasketUnitOfWork, cart_id: UUID) -> ShoppingCart:
    cart = await uow.carts.get(cart_id)
    if cart is None:
        raise CartNotFoundError(cart_id)
    return cart
