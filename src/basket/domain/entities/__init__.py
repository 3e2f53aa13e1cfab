from basket.domain.entities.shopping_cart import (
    CartDiscount,
    CartItem,
    CartStatus,
    DiscountType,
    ShoppingCart,
)

__all__ = ["CartDiscount", "CartItem", "CartStatus", "DiscountType", "ShoppingCart"]
