from basket.infrastructure.persistence.repositories.shopping_cart_repository import (
    CartLineRow,
    ShoppingCartRepository,
)

__all__ = ["CartLineRow", "ShoppingCartRepository"]
