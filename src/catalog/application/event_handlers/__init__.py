from catalog.application.event_handlers.product_lifecycle_log_handler import ProductLifecycleLogHandler
from catalog.application.event_handlers.product_price_changed_bridge import ProductPriceChangedBridgeHandler

__all__ = [
    "ProductLifecycleLogHandler",
    "ProductPriceChangedBridgeHandler",
]
