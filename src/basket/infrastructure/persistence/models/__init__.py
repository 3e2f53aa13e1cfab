from basket.infrastructure.persistence.models.basket_models import (
    CartDiscountModel,
    ShoppingCartItemModel,
    ShoppingCartModel,
)

__all__ = ["CartDiscountModel", "ShoppingCartItemModel", "ShoppingCartModel"]
