"""
Product Domain Events
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain.domain_event import DomainEvent


@dataclass(frozen=True)
class ProductCreatedEvent(DomainEvent):
    """Raised when a new product is created"""

    product_id: UUID
    name: str
    price: Decimal
    categories: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProductPriceChangedEvent(DomainEvent):
    """
    Raised when a product's price actually changes.

    Carries the product's current name, categories, description and image
    so handlers can build a full snapshot without reloading the product.
    """

    product_id: UUID
    old_price: Decimal
    new_price: Decimal
    reason: str
    name: str
    categories: tuple[str, ...]
    description: str
    image_file: str


@dataclass(frozen=True)
class ProductCategoriesUpdatedEvent(DomainEvent):
    """Raised when the category set of a product changes"""

    product_id: UUID
    old_categories: tuple[str, ...]
    new_categories: tuple[str, ...]


@dataclass(frozen=True)
class ProductDeletedEvent(DomainEvent):
    """Raised when a product is soft-deleted"""

    product_id: UUID
    name: str


@dataclass(frozen=True)
class ProductRestoredEvent(DomainEvent):
    """Raised when a soft-deleted product is restored"""

    product_id: UUID
    name: str
