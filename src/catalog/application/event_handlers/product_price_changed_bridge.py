"""
Product Price Changed Bridge
Forwards the in-process price-changed event to the message bus
"""
from __future__ import annotations

from shared.infrastructure.observability.logger import get_logger
from shared.messaging.events import ProductPriceChangedIntegrationEvent
from shared.messaging.message_bus import MessageBus
from catalog.domain.events.product_events import ProductPriceChangedEvent

logger = get_logger(__name__)


class ProductPriceChangedBridgeHandler:
    """
    The only catalog handler whose effect leaves the process.

    Builds a full product snapshot from the domain event and publishes it.
    A publish error propagates to the dispatcher, which logs it; the event
    is not retried here.
    """

    def __init__(self, bus: MessageBus) -> None:
        self.bus = bus

    async def __call__(self, event: ProductPriceChangedEvent) -> None:
        integration_event = ProductPriceChangedIntegrationEvent(
            product_id=event.product_id,
            name=event.name,
            category=list(event.categories),
            description=event.description,
            image_file=event.image_file,
            price=event.new_price,
        )
        await self.bus.publish(integration_event)

        logger.info(
            "Price change forwarded to message bus",
            product_id=str(event.product_id),
            old_price=str(event.old_price),
            new_price=str(event.new_price),
            integration_event_id=str(integration_event.event_id),
        )
