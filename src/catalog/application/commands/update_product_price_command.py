"""
Update Product Price Command
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from catalog.application.commands._loading import load_product
from catalog.application.dto.product_dto import ProductDTO
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateProductPriceCommand(BaseCommand):
    """
    Command to change a product's price.

    Attributes:
        product_id: Product UUID
        new_price: New price (> 0)
        reason: Free-text reason carried on the price-changed event
    """
    product_id: UUID
    new_price: Decimal
    reason: str = "Price update"


class UpdateProductPriceHandler(CommandHandler[UpdateProductPriceCommand, ProductDTO]):
    """
    Handler for UpdateProductPriceCommand.

    Committing dispatches ProductPriceChangedEvent, which the bridge handler
    forwards to the message bus for the basket module.
    """

    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: UpdateProductPriceCommand) -> ProductDTO:
        async with self.uow:
            product = await load_product(self.uow, command.product_id)
            old_price = product.price
            product.update_price(command.new_price, command.reason)
            await self.uow.commit()

        logger.info(
            "Product price updated",
            product_id=str(product.id),
            old_price=str(old_price),
            new_price=str(product.price),
        )
        return ProductDTO.from_entity(product)
