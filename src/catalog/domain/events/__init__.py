from catalog.domain.events.product_events import (
    ProductCategoriesUpdatedEvent,
    ProductCreatedEvent,
    ProductDeletedEvent,
    ProductPriceChangedEvent,
    ProductRestoredEvent,
)

__all__ = [
    "ProductCreatedEvent",
    "ProductPriceChangedEvent",
    "ProductCategoriesUpdatedEvent",
    "ProductDeletedEvent",
    "ProductRestoredEvent",
]
