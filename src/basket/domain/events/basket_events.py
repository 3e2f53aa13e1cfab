"""
Shopping Cart Domain Events
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain.domain_event import DomainEvent


@dataclass(frozen=True)
class ShoppingCartCreatedEvent(DomainEvent):
    cart_id: UUID
    user_name: str
    session_id: Optional[str] = None


@dataclass(frozen=True)
class CartItemAddedEvent(DomainEvent):
    cart_id: UUID
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Decimal
    variant: Optional[str] = None


@dataclass(frozen=True)
class CartItemRemovedEvent(DomainEvent):
    cart_id: UUID
    product_id: UUID
    product_name: str
    variant: Optional[str] = None


@dataclass(frozen=True)
class CartItemQuantityUpdatedEvent(DomainEvent):
    cart_id: UUID
    product_id: UUID
    new_quantity: int
    variant: Optional[str] = None


@dataclass(frozen=True)
class DiscountAppliedEvent(DomainEvent):
    cart_id: UUID
    discount_code: str
    discount_type: str
    discount_value: Decimal


@dataclass(frozen=True)
class ShoppingCartClearedEvent(DomainEvent):
    cart_id: UUID
    user_name: str


@dataclass(frozen=True)
class ShoppingCartCheckedOutEvent(DomainEvent):
    """Raised once, when an active non-empty cart is checked out"""

    cart_id: UUID
    user_name: str
    total: Decimal
    item_count: int
