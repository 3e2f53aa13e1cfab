"""
Basket Domain Exceptions
"""
from __future__ import annotations

from uuid import UUID

from shared.exceptions import InvalidOperationError, NotFoundError, ValidationError


class InvalidCartOperationError(InvalidOperationError):
    """Raised when the cart's state forbids the requested change."""
    code = "invalid_cart_operation"


class InvalidCartItemError(ValidationError):
    code = "invalid_cart_item"


class InvalidCartDiscountError(ValidationError):
    code = "invalid_cart_discount"


class CartNotFoundError(NotFoundError):
    code = "cart_not_found"

    def __init__(self, cart_id: UUID) -> None:
        super().__init__(
            f"Shopping cart not found: {cart_id}",
            details={"cart_id": str(cart_id)},
        )
