"""
Product Price Changed Consumer
Turns the catalog's price-changed integration event into a basket command
"""
from __future__ import annotations

from shared.application.mediator import Mediator
from shared.infrastructure.observability.logger import get_logger
from shared.messaging.events import ProductPriceChangedIntegrationEvent
from basket.application.commands.update_item_price_in_basket_command import UpdateItemPriceInBasketCommand

logger = get_logger(__name__)


class ProductPriceChangedConsumer:
    """
    Message bus consumer for ProductPriceChangedIntegrationEvent.

    Failures are logged and re-raised so the bus leaves the message
    unacknowledged and redelivers it. Replaying a message rewrites the
    same prices.
    """

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    async def __call__(self, event: ProductPriceChangedIntegrationEvent) -> None:
        logger.info(
            "Product price change received",
            event_id=str(event.event_id),
            product_id=str(event.product_id),
            price=str(event.price),
        )
        command = UpdateItemPriceInBasketCommand(
            product_id=event.product_id,
            new_price=event.price,
            product_name=event.name,
        )
        try:
            updated = await self.mediator.send(command)
        except Exception as e:
            logger.error(
                "Cart price reconciliation failed",
                event_id=str(event.event_id),
                product_id=str(event.product_id),
                error=str(e),
                exc_info=True,
            )
            raise

        logger.info(
            "Product price change applied to carts",
            event_id=str(event.event_id),
            product_id=str(event.product_id),
            updated=updated,
        )
