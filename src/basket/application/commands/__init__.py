"""
Basket Commands
"""
from basket.application.commands.apply_basket_discount_command import (
    ApplyBasketDiscountCommand,
    ApplyBasketDiscountHandler,
)
from basket.application.commands.cart_item_commands import (
    AddItemToBasketCommand,
    AddItemToBasketHandler,
    RemoveItemFromBasketCommand,
    RemoveItemFromBasketHandler,
    UpdateItemQuantityCommand,
    UpdateItemQuantityHandler,
)
from basket.application.commands.cart_lifecycle_commands import (
    CheckoutBasketCommand,
    CheckoutBasketHandler,
    ClearBasketCommand,
    ClearBasketHandler,
    DeleteBasketCommand,
    DeleteBasketHandler,
)
from basket.application.commands.create_basket_command import (
    CreateBasketCommand,
    CreateBasketHandler,
)
from basket.application.commands.update_item_price_in_basket_command import (
    UpdateItemPriceInBasketCommand,
    UpdateItemPriceInBasketHandler,
)

__all__ = [
    "AddItemToBasketCommand",
    "AddItemToBasketHandler",
    "ApplyBasketDiscountCommand",
    "ApplyBasketDiscountHandler",
    "CheckoutBasketCommand",
    "CheckoutBasketHandler",
    "ClearBasketCommand",
    "ClearBasketHandler",
    "CreateBasketCommand",
    "CreateBasketHandler",
    "DeleteBasketCommand",
    "DeleteBasketHandler",
    "RemoveItemFromBasketCommand",
    "RemoveItemFromBasketHandler",
    "UpdateItemPriceInBasketCommand",
    "UpdateItemPriceInBasketHandler",
    "UpdateItemQuantityCommand",
    "UpdateItemQuantityHandler",
]
