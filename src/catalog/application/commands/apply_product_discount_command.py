"""
Apply Product Discount Command
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from catalog.application.commands._loading import load_product
from catalog.application.dto.product_dto import ProductDTO
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork


@dataclass(frozen=True)
class ApplyProductDiscountCommand(BaseCommand):
    """
    Command to reduce a product's price by a percentage.

    The reduction goes through the regular price change, so it raises the
    same price-changed event.
    """
    product_id: UUID
    percentage: Decimal
    reason: str = "Discount applied"


class ApplyProductDiscountHandler(CommandHandler[ApplyProductDiscountCommand, ProductDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: ApplyProductDiscountCommand) -> ProductDTO:
        async with self.uow:
            product = await load_product(self.uow, command.product_id)
            product.apply_discount(command.percentage, command.reason)
            await self.uow.commit()
            return ProductDTO.from_entity(product)
