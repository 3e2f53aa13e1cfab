from basket.domain.events.basket_events import (
    CartItemAddedEvent,
    CartItemQuantityUpdatedEvent,
    CartItemRemovedEvent,
    DiscountAppliedEvent,
    ShoppingCartCheckedOutEvent,
    ShoppingCartClearedEvent,
    ShoppingCartCreatedEvent,
)

__all__ = [
    "CartItemAddedEvent",
    "CartItemQuantityUpdatedEvent",
    "CartItemRemovedEvent",
    "DiscountAppliedEvent",
    "ShoppingCartCheckedOutEvent",
    "ShoppingCartClearedEvent",
    "ShoppingCartCreatedEvent",
]
