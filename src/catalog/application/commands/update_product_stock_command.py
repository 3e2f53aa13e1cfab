"""
Update Product Stock Command
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from catalog.application.commands._loading import load_product
from catalog.application.dto.product_dto import ProductDTO
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork


@dataclass(frozen=True)
class UpdateProductStockCommand(BaseCommand):
    product_id: UUID
    stock_quantity: int


class UpdateProductStockHandler(CommandHandler[UpdateProductStockCommand, ProductDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: UpdateProductStockCommand) -> ProductDTO:
        async with self.uow:
            product = await load_product(self.uow, command.product_id)
            product.update_stock(command.stock_quantity)
            await self.uow.commit()
            return ProductDTO.from_entity(product)
