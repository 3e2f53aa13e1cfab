from basket.application.integration_event_handlers.product_price_changed_consumer import (
    ProductPriceChangedConsumer,
)

__all__ = ["ProductPriceChangedConsumer"]
