"""
Product DTOs
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from catalog.domain.entities.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """
    Product Data Transfer Object used within the application layer.
    """
    id: UUID
    name: str
    description: str
    price: Decimal
    image_file: str
    categories: list[str]
    stock_quantity: int
    is_available: bool
    is_deleted: bool
    created_at: Optional[datetime]
    last_modified_at: Optional[datetime]

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            image_file=product.image_file,
            categories=list(product.categories),
            stock_quantity=product.stock_quantity,
            is_available=product.is_available,
            is_deleted=product.is_deleted,
            created_at=product.created_at,
            last_modified_at=product.last_modified_at,
        )


@dataclass(frozen=True)
class ProductPageDTO:
    items: list[ProductDTO]
    total: int
    page: int
    page_size: int
