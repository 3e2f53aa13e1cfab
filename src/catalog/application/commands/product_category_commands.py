"""
Product Category Commands
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
class AddProductCategoriesCommand(BaseCommand):
    product_id: UUID
    categories: tuple[str, ...]


@dataclass(frozen=True)
class RemoveProductCategoryCommand(BaseCommand):
    product_id: UUID
    category: str


class AddProductCategoriesHandler(CommandHandler[AddProductCategoriesCommand, ProductDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: AddProductCategoriesCommand) -> ProductDTO:
        async with self.uow:
            product = await load_product(self.uow, command.product_id)
            product.add_categories(command.categories)
            await self.uow.commit()
            return ProductDTO.from_entity(product)


class RemoveProductCategoryHandler(CommandHandler[RemoveProductCategoryCommand, ProductDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: RemoveProductCategoryCommand) -> ProductDTO:
        async with self.uow:
            product = await load_product(self.uow, command.product_id)
            product.remove_category(command.category)
            await self.uow.commit()
            return ProductDTO.from_entity(product)
