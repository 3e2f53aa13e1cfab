"""
Update Product Command
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from catalog.application.commands._loading import load_product
from catalog.application.dto.product_dto import ProductDTO
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork


@dataclass(frozen=True)
class UpdateProductCommand(BaseCommand):
    """
    Command to change a product's descriptive fields.

    Fields left as None are not touched.
    """
    product_id: UUID
    name: Optional[str] = None
    description: Optional[str] = None
    image_file: Optional[str] = None


class UpdateProductHandler(CommandHandler[UpdateProductCommand, ProductDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        async with self.uow:
            product = await load_product(self.uow, command.product_id)
            if command.name is not None:
                product.update_name(command.name)
            if command.description is not None:
                product.update_description(command.description)
            if command.image_file is not None:
                product.update_image_file(command.image_file)
            await self.uow.commit()
            return ProductDTO.from_entity(product)
