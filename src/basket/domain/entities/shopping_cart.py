"""
Shopping Cart Entity - Basket aggregate root
Line items keep copies of the catalog name and price taken when they were added
"""
from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Iterable, Optional, Union
from uuid import UUID, uuid4

from shared.domain.base_aggregate_root import BaseAggregateRoot
from shared.domain.base_entity import BaseEntity
from shared.domain.domain_event import utc_now
from basket.domain.events.basket_events import (
    CartItemAddedEvent,
    CartItemQuantityUpdatedEvent,
    CartItemRemovedEvent,
    DiscountAppliedEvent,
    ShoppingCartCheckedOutEvent,
    ShoppingCartClearedEvent,
    ShoppingCartCreatedEvent,
)
from basket.domain.exceptions import (
    InvalidCartDiscountError,
    InvalidCartItemError,
    InvalidCartOperationError,
)

_CENTS = Decimal("0.01")
_ZERO = Decimal("0.00")

AmountLike = Union[Decimal, int, str]


def _to_amount(value: AmountLike, error: type[Exception], label: str) -> Decimal:
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise error(f"{label} is not a number: {value!r}") from None
    if not amount.is_finite() or amount < 0:
        raise error(f"{label} cannot be negative: {value}")
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def _variant_key(variant: Optional[str]) -> Optional[str]:
    if variant is None or not variant.strip():
        return None
    return variant.strip()


class CartStatus(str, Enum):
    ACTIVE = "Active"
    CHECKED_OUT = "CheckedOut"


class DiscountType(str, Enum):
    PERCENTAGE = "Percentage"
    FIXED = "Fixed"

    @classmethod
    def parse(cls, value: Union[DiscountType, str]) -> Optional[DiscountType]:
        if isinstance(value, cls):
            return value
        needle = str(value).strip().casefold()
        return next((t for t in cls if needle in (t.value.casefold(), t.name.casefold())), None)


class CartItem(BaseEntity):
    """
    One line of a cart: a product (optionally a variant of it) and a quantity.

    ``product_name``, ``product_price`` and ``unit_price`` are copies of the
    catalog values. They only change when the price reconciliation rewrites them.
    """

    def __init__(
        self,
        id: UUID,
        cart_id: UUID,
        product_id: UUID,
        product_name: str,
        product_price: Decimal,
        unit_price: Decimal,
        quantity: int,
        variant: Optional[str] = None,
        added_at: Optional[datetime] = None,
        last_modified_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, last_modified_at=last_modified_at)
        self.cart_id = cart_id
        self.product_id = product_id
        self.product_name = product_name
        self.product_price = product_price
        self.unit_price = unit_price
        self.quantity = quantity
        self.variant = variant
        self.added_at = added_at

    @staticmethod
    def create(
        cart_id: UUID,
        product_id: UUID,
        product_name: str,
        price: AmountLike,
        quantity: int,
        variant: Optional[str] = None,
    ) -> CartItem:
        if quantity <= 0:
            raise InvalidCartItemError("Quantity must be greater than zero.", details={"quantity": quantity})
        if product_name is None or not product_name.strip():
            raise InvalidCartItemError("Product name cannot be empty.")
        unit_price = _to_amount(price, InvalidCartItemError, "Unit price")
        return CartItem(
            id=uuid4(),
            cart_id=cart_id,
            product_id=product_id,
            product_name=product_name.strip(),
            product_price=unit_price,
            unit_price=unit_price,
            quantity=quantity,
            variant=_variant_key(variant),
            added_at=utc_now(),
        )

    def matches(self, product_id: UUID, variant: Optional[str]) -> bool:
        return self.product_id == product_id and self.variant == _variant_key(variant)

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity


class CartDiscount(BaseEntity):
    """A named discount; percentage of the subtotal or a fixed amount, never more than the subtotal."""

    def __init__(
        self,
        id: UUID,
        cart_id: UUID,
        code: str,
        discount_type: DiscountType,
        value: Decimal,
        applied_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id)
        self.cart_id = cart_id
        self.code = code
        self.discount_type = discount_type
        self.value = value
        self.applied_at = applied_at

    @staticmethod
    def create(cart_id: UUID, code: str, discount_type: Union[DiscountType, str], value: AmountLike) -> CartDiscount:
        if code is None or not code.strip():
            raise InvalidCartDiscountError("Discount code cannot be empty.")
        kind = DiscountType.parse(discount_type)
        if kind is None:
            raise InvalidCartDiscountError(
                f"Unknown discount type: {discount_type}",
                details={"allowed": [t.value for t in DiscountType]},
            )
        amount = _to_amount(value, InvalidCartDiscountError, "Discount value")
        if kind is DiscountType.PERCENTAGE and amount > 100:
            raise InvalidCartDiscountError("Percentage discount cannot exceed 100.")
        return CartDiscount(id=uuid4(), cart_id=cart_id, code=code.strip().upper(), discount_type=kind, value=amount)

    def calculate(self, subtotal: Decimal) -> Decimal:
        if self.discount_type is DiscountType.PERCENTAGE:
            amount = subtotal * self.value / Decimal(100)
        else:
            amount = self.value
        return min(amount, subtotal).quantize(_CENTS, rounding=ROUND_HALF_UP)


class ShoppingCart(BaseAggregateRoot):
    """
    Shopping cart aggregate root.

    An active cart accepts item, quantity and discount changes; once checked
    out every mutation is rejected with InvalidCartOperationError and the
    cart is left untouched. Lines are unique per (product_id, variant).

    Attributes:
        user_name: Owner of the cart
        session_id: Anonymous session the cart was started from, if any
        status: Active or CheckedOut
        items: Line items in insertion order
        discounts: Applied discounts, unique by code
    """

    def __init__(
        self,
        id: UUID,
        user_name: str,
        session_id: Optional[str] = None,
        status: CartStatus = CartStatus.ACTIVE,
        items: Optional[Iterable[CartItem]] = None,
        discounts: Optional[Iterable[CartDiscount]] = None,
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
        self._user_name = user_name
        self._session_id = session_id
        self._status = status
        self._items: list[CartItem] = list(items or [])
        self._discounts: list[CartDiscount] = list(discounts or [])

    @staticmethod
    def create(user_name: str, session_id: Optional[str] = None, id: Optional[UUID] = None) -> ShoppingCart:
        """
        Factory method to create an empty active cart.

        Raises:
            InvalidCartOperationError: If user_name is blank
        """
        if user_name is None or not user_name.strip():
            raise InvalidCartOperationError("Cart owner cannot be empty.")

        cart = ShoppingCart(id=id or uuid4(), user_name=user_name.strip(), session_id=session_id)
        cart.add_domain_event(
            ShoppingCartCreatedEvent(cart_id=cart.id, user_name=cart.user_name, session_id=session_id)
        )
        return cart

    @classmethod
    def rehydrate(cls, **state: object) -> ShoppingCart:
        """Rebuild a stored cart; trusted input, no validation, no events."""
        return cls(**state)  # type: ignore[arg-type]

    def _ensure_active(self) -> None:
        if self._status is not CartStatus.ACTIVE:
            raise InvalidCartOperationError(
                f"Cannot modify cart with status: {self._status.value}",
                details={"cart_id": str(self.id), "status": self._status.value},
            )

    def find_item(self, product_id: UUID, variant: Optional[str] = None) -> Optional[CartItem]:
        return next((item for item in self._items if item.matches(product_id, variant)), None)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def add_item(
        self,
        product_id: UUID,
        quantity: int,
        price: AmountLike,
        name: str,
        variant: Optional[str] = None,
    ) -> CartItem:
        """
        Add a product, or increase the quantity of its existing line.

        An existing line keeps its original price copy; only the
        reconciliation changes stored prices.
        """
        self._ensure_active()
        if quantity <= 0:
            raise InvalidCartItemError("Quantity must be greater than zero.", details={"quantity": quantity})

        existing = self.find_item(product_id, variant)
        if existing is not None:
            existing.quantity += quantity
            self.add_domain_event(
                CartItemQuantityUpdatedEvent(
                    cart_id=self.id,
                    product_id=product_id,
                    new_quantity=existing.quantity,
                    variant=existing.variant,
                )
            )
            return existing

        item = CartItem.create(self.id, product_id, name, price, quantity, variant)
        self._items.append(item)
        self.add_domain_event(
            CartItemAddedEvent(
                cart_id=self.id,
                product_id=product_id,
                product_name=item.product_name,
                quantity=quantity,
                unit_price=item.unit_price,
                variant=item.variant,
            )
        )
        return item

    def remove_item(self, product_id: UUID, variant: Optional[str] = None) -> None:
        self._ensure_active()
        item = self.find_item(product_id, variant)
        if item is None:
            return
        self._items.remove(item)
        self.add_domain_event(
            CartItemRemovedEvent(
                cart_id=self.id,
                product_id=product_id,
                product_name=item.product_name,
                variant=item.variant,
            )
        )

    def update_item_quantity(self, product_id: UUID, quantity: int, variant: Optional[str] = None) -> None:
        """Set a line's quantity; zero or less removes the line."""
        self._ensure_active()
        if quantity <= 0:
            self.remove_item(product_id, variant)
            return

        item = self.find_item(product_id, variant)
        if item is None or item.quantity == quantity:
            return
        item.quantity = quantity
        self.add_domain_event(
            CartItemQuantityUpdatedEvent(
                cart_id=self.id,
                product_id=product_id,
                new_quantity=quantity,
                variant=item.variant,
            )
        )

    def clear(self) -> None:
        self._ensure_active()
        self._items.clear()
        self._discounts.clear()
        self.add_domain_event(ShoppingCartClearedEvent(cart_id=self.id, user_name=self._user_name))

    # ------------------------------------------------------------------
    # Discounts
    # ------------------------------------------------------------------
    def apply_discount(self, code: str, discount_type: Union[DiscountType, str], value: AmountLike) -> None:
        """Apply a discount, replacing any earlier one with the same code."""
        self._ensure_active()
        discount = CartDiscount.create(self.id, code, discount_type, value)
        self._discounts = [d for d in self._discounts if d.code != discount.code]
        self._discounts.append(discount)
        self.add_domain_event(
            DiscountAppliedEvent(
                cart_id=self.id,
                discount_code=discount.code,
                discount_type=discount.discount_type.value,
                discount_value=discount.value,
            )
        )

    # ------------------------------------------------------------------
    # Checkout
    # ------------------------------------------------------------------
    def checkout(self) -> None:
        self._ensure_active()
        if not self._items:
            raise InvalidCartOperationError("Cannot checkout empty cart", details={"cart_id": str(self.id)})

        self._status = CartStatus.CHECKED_OUT
        self.add_domain_event(
            ShoppingCartCheckedOutEvent(
                cart_id=self.id,
                user_name=self._user_name,
                total=self.total,
                item_count=self.item_count,
            )
        )

    # Properties
    @property
    def user_name(self) -> str:
        return self._user_name

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    @property
    def status(self) -> CartStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status is CartStatus.ACTIVE

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def discounts(self) -> tuple[CartDiscount, ...]:
        return tuple(self._discounts)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.total_price for item in self._items), _ZERO)

    @property
    def discount_amount(self) -> Decimal:
        subtotal = self.subtotal
        amount = sum((d.calculate(subtotal) for d in self._discounts), _ZERO)
        return min(amount, subtotal)

    @property
    def total(self) -> Decimal:
        return self.subtotal - self.discount_amount

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)
