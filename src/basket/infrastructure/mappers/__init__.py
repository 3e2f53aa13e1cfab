from basket.infrastructure.mappers.shopping_cart_mapper import ShoppingCartMapper

__all__ = ["ShoppingCartMapper"]
