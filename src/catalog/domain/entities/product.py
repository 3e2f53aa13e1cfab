"""
Product Entity - Catalog aggregate root
Owns price, categories and stock; raises the events other modules react to
"""
from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Optional, Union
from uuid import UUID, uuid4

from shared.domain.base_aggregate_root import BaseAggregateRoot
from shared.domain.base_entity import SoftDeletable
from catalog.domain.events.product_events import (
    ProductCategoriesUpdatedEvent,
    ProductCreatedEvent,
    ProductDeletedEvent,
    ProductPriceChangedEvent,
    ProductRestoredEvent,
)
from catalog.domain.exceptions import (
    InvalidDiscountError,
    InvalidProductCategoryError,
    InvalidProductDescriptionError,
    InvalidProductImageError,
    InvalidProductNameError,
    InvalidProductPriceError,
    InvalidStockQuantityError,
)

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
CATEGORY_MAX_LENGTH = 100

_CENTS = Decimal("0.01")

PriceLike = Union[Decimal, int, str]


def _to_price(value: PriceLike) -> Decimal:
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidProductPriceError(Decimal(0)) from None
    if not price.is_finite() or price <= 0:
        raise InvalidProductPriceError(price)
    return price.quantize(_CENTS, rounding=ROUND_HALF_UP)


def _validate_name(name: Optional[str]) -> str:
    if name is None or not name.strip() or len(name.strip()) > NAME_MAX_LENGTH:
        raise InvalidProductNameError(name)
    return name.strip()


def _validate_description(description: Optional[str]) -> str:
    if description is None or not description.strip():
        raise InvalidProductDescriptionError("Product description cannot be empty.")
    if len(description.strip()) > DESCRIPTION_MAX_LENGTH:
        raise InvalidProductDescriptionError("Product description cannot exceed 1000 characters.")
    return description.strip()


def _validate_image_file(image_file: Optional[str]) -> str:
    if image_file is None or not image_file.strip():
        raise InvalidProductImageError("Product image file cannot be empty.")
    return image_file.strip()


def _validate_category(category: Optional[str]) -> str:
    if category is None or not category.strip():
        raise InvalidProductCategoryError("Category cannot be empty.")
    if len(category.strip()) > CATEGORY_MAX_LENGTH:
        raise InvalidProductCategoryError("Category name cannot exceed 100 characters.")
    return category.strip()


class Product(BaseAggregateRoot, SoftDeletable):
    """
    Product aggregate root.

    Created through ``create`` (validates, raises ProductCreatedEvent) and
    reloaded through ``rehydrate`` (no validation, no events). Every
    mutation goes through a named method that validates before touching
    state, so a rejected call leaves the product and its events unchanged.

    Attributes:
        name: Display name (≤200 chars)
        description: Long description (≤1000 chars)
        price: Unit price, always > 0, two decimal places
        image_file: Image reference
        categories: Case-insensitively unique category names
        stock_quantity: Units in stock (≥0)
        is_deleted: Soft-delete flag
    """

    def __init__(
        self,
        id: UUID,
        name: str,
        description: str,
        price: Decimal,
        image_file: str,
        categories: Optional[Iterable[str]] = None,
        stock_quantity: int = 0,
        is_deleted: bool = False,
        deleted_at: Optional[datetime] = None,
        deleted_by: Optional[str] = None,
        created_at: Optional[datetime] = None,
        created_by: Optional[str] = None,
        last_modified_at: Optional[datetime] = None,
        last_modified_by: Optional[str] = None,
    ) -> None:
        super().__init__(
            id,
            created_at=created_at,
            created_by=created_by,
            last_modified_at=last_modified_at,
            last_modified_by=last_modified_by,
        )
        self._name = name
        self._description = description
        self._price = price
        self._image_file = image_file
        self._categories: list[str] = list(categories or [])
        self._stock_quantity = stock_quantity
        self.is_deleted = is_deleted
        self.deleted_at = deleted_at
        self.deleted_by = deleted_by

    @staticmethod
    def create(
        name: str,
        description: str,
        price: PriceLike,
        image_file: str,
        categories: Optional[Iterable[str]] = None,
        stock_quantity: int = 0,
        id: Optional[UUID] = None,
    ) -> Product:
        """
        Factory method to create a new product.

        Returns:
            New Product with ProductCreatedEvent raised

        Raises:
            ValidationError subclasses: If any field is invalid
        """
        if stock_quantity < 0:
            raise InvalidStockQuantityError(stock_quantity)

        product = Product(
            id=id or uuid4(),
            name=_validate_name(name),
            description=_validate_description(description),
            price=_to_price(price),
            image_file=_validate_image_file(image_file),
            stock_quantity=stock_quantity,
        )
        product._merge_categories(categories or [])

        product.add_domain_event(
            ProductCreatedEvent(
                product_id=product.id,
                name=product.name,
                price=product.price,
                categories=product.categories,
            )
        )
        return product

    @classmethod
    def rehydrate(cls, **state: object) -> Product:
        """Rebuild a stored product; trusted input, no validation, no events."""
        return cls(**state)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Price
    # ------------------------------------------------------------------
    def update_price(self, new_price: PriceLike, reason: str = "Price update") -> None:
        """Change the price; raises ProductPriceChangedEvent only if it differs."""
        price = _to_price(new_price)
        if price == self._price:
            return

        old_price = self._price
        self._price = price
        self.add_domain_event(
            ProductPriceChangedEvent(
                product_id=self.id,
                old_price=old_price,
                new_price=price,
                reason=reason,
                name=self._name,
                categories=self.categories,
                description=self._description,
                image_file=self._image_file,
            )
        )

    def apply_discount(self, percentage: PriceLike, reason: str = "Discount applied") -> None:
        pct = Decimal(str(percentage))
        if pct < 0 or pct > 100:
            raise InvalidDiscountError("Discount percentage must be between 0 and 100.")
        self.update_price(self._price - self._price * pct / Decimal(100), reason)

    # ------------------------------------------------------------------
    # Details and stock
    # ------------------------------------------------------------------
    def update_name(self, name: str) -> None:
        self._name = _validate_name(name)

    def update_description(self, description: str) -> None:
        self._description = _validate_description(description)

    def update_image_file(self, image_file: str) -> None:
        self._image_file = _validate_image_file(image_file)

    def update_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise InvalidStockQuantityError(quantity)
        self._stock_quantity = quantity

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------
    def has_category(self, category: str) -> bool:
        needle = category.strip().casefold()
        return any(existing.casefold() == needle for existing in self._categories)

    def _merge_categories(self, categories: Iterable[str]) -> None:
        for category in [c for c in categories if c is not None and c.strip()]:
            validated = _validate_category(category)
            if not self.has_category(validated):
                self._categories.append(validated)

    def add_category(self, category: str) -> None:
        self.add_categories([_validate_category(category)])

    def add_categories(self, categories: Iterable[str]) -> None:
        """Add categories, skipping blanks and case-insensitive duplicates."""
        old = self.categories
        candidates = [c for c in categories if c is not None and c.strip()]
        for category in candidates:
            _validate_category(category)
        self._merge_categories(candidates)
        if self.categories != old:
            self.add_domain_event(
                ProductCategoriesUpdatedEvent(
                    product_id=self.id,
                    old_categories=old,
                    new_categories=self.categories,
                )
            )

    def remove_category(self, category: str) -> None:
        if category is None or not category.strip():
            return
        old = self.categories
        needle = category.strip().casefold()
        self._categories = [c for c in self._categories if c.casefold() != needle]
        if self.categories != old:
            self.add_domain_event(
                ProductCategoriesUpdatedEvent(
                    product_id=self.id,
                    old_categories=old,
                    new_categories=self.categories,
                )
            )

    # ------------------------------------------------------------------
    # Soft delete
    # ------------------------------------------------------------------
    def soft_delete(self) -> None:
        """Flag as deleted; the save interceptor stamps deleted_at/deleted_by."""
        if self.is_deleted:
            return
        self.is_deleted = True
        self.add_domain_event(ProductDeletedEvent(product_id=self.id, name=self._name))

    def restore(self) -> None:
        if not self.is_deleted:
            return
        self.is_deleted = False
        self.deleted_at = None
        self.deleted_by = None
        self.add_domain_event(ProductRestoredEvent(product_id=self.id, name=self._name))

    # Properties
    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def image_file(self) -> str:
        return self._image_file

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(self._categories)

    @property
    def stock_quantity(self) -> int:
        return self._stock_quantity

    @property
    def is_available(self) -> bool:
        return self._stock_quantity > 0 and not self.is_deleted
