"""
Shopping Cart DTOs
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from basket.domain.entities.shopping_cart import CartDiscount, CartItem, ShoppingCart
from basket.infrastructure.persistence.repositories.shopping_cart_repository import CartLineRow


@dataclass(frozen=True)
class CartItemDTO:
    id: UUID
    product_id: UUID
    product_name: str
    product_price: Decimal
    unit_price: Decimal
    quantity: int
    variant: Optional[str]
    total_price: Decimal

    @classmethod
    def from_entity(cls, item: CartItem) -> CartItemDTO:
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            product_price=item.product_price,
            unit_price=item.unit_price,
            quantity=item.quantity,
            variant=item.variant,
            total_price=item.total_price,
        )


@dataclass(frozen=True)
class CartDiscountDTO:
    code: str
    discount_type: str
    value: Decimal

    @classmethod
    def from_entity(cls, discount: CartDiscount) -> CartDiscountDTO:
        return cls(code=discount.code, discount_type=discount.discount_type.value, value=discount.value)


@dataclass(frozen=True)
class CartDTO:
    """
    Shopping cart Data Transfer Object with computed totals.
    """
    id: UUID
    user_name: str
    session_id: Optional[str]
    status: str
    items: list[CartItemDTO]
    discounts: list[CartDiscountDTO]
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal
    item_count: int
    created_at: Optional[datetime]
    last_modified_at: Optional[datetime]

    @classmethod
    def from_entity(cls, cart: ShoppingCart) -> CartDTO:
        return cls(
            id=cart.id,
            user_name=cart.user_name,
            session_id=cart.session_id,
            status=cart.status.value,
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            discounts=[CartDiscountDTO.from_entity(d) for d in cart.discounts],
            subtotal=cart.subtotal,
            discount_amount=cart.discount_amount,
            total=cart.total,
            item_count=cart.item_count,
            created_at=cart.created_at,
            last_modified_at=cart.last_modified_at,
        )


@dataclass(frozen=True)
class CartLineDTO:
    """A cart line holding a product, as returned by the by-product lookup."""
    cart_id: UUID
    user_name: str
    status: str
    quantity: int
    variant: Optional[str]
    unit_price: Decimal

    @classmethod
    def from_row(cls, row: CartLineRow) -> CartLineDTO:
        return cls(
            cart_id=row.cart_id,
            user_name=row.user_name,
            status=row.status,
            quantity=row.quantity,
            variant=row.variant,
            unit_price=row.unit_price,
        )
