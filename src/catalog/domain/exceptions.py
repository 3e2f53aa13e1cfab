"""
Catalog Domain Exceptions
"""
from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from shared.exceptions import NotFoundError, ValidationError


class InvalidProductNameError(ValidationError):
    code = "invalid_product_name"

    def __init__(self, name: str | None) -> None:
        super().__init__(
            "Product name must be non-empty and at most 200 characters.",
            details={"name": name},
        )


class InvalidProductDescriptionError(ValidationError):
    code = "invalid_product_description"


class InvalidProductImageError(ValidationError):
    code = "invalid_product_image"


class InvalidProductPriceError(ValidationError):
    code = "invalid_product_price"

    def __init__(self, price: Decimal) -> None:
        super().__init__(
            f"Product price must be greater than zero, got {price}.",
            details={"price": str(price)},
        )


class InvalidProductCategoryError(ValidationError):
    code = "invalid_product_category"


class InvalidStockQuantityError(ValidationError):
    code = "invalid_stock_quantity"

    def __init__(self, quantity: int) -> None:
        super().__init__(
            "Stock quantity cannot be negative.",
            details={"stock_quantity": quantity},
        )


class InvalidDiscountError(ValidationError):
    code = "invalid_discount"


class ProductNotFoundError(NotFoundError):
    code = "product_not_found"

    def __init__(self, product_id: UUID) -> None:
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": str(product_id)},
        )
