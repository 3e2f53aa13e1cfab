"""
Delete / Restore Product Commands
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from catalog.application.commands._loading import load_product
from catalog.application.dto.product_dto import ProductDTO
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeleteProductCommand(BaseCommand):
    product_id: UUID


@dataclass(frozen=True)
class RestoreProductCommand(BaseCommand):
    product_id: UUID


class DeleteProductHandler(CommandHandler[DeleteProductCommand, None]):
    """
    Handler for DeleteProductCommand.

    Removes the product from the unit of work; the save interceptor turns
    the removal into a soft delete.
    """

    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: DeleteProductCommand) -> None:
        async with self.uow:
            product = await load_product(self.uow, command.product_id)
            self.uow.products.remove(product)
            await self.uow.commit()

        logger.info("Product deleted", product_id=str(command.product_id))


class RestoreProductHandler(CommandHandler[RestoreProductCommand, ProductDTO]):
    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: RestoreProductCommand) -> ProductDTO:
        async with self.uow:
            product = await load_product(self.uow, command.product_id, include_deleted=True)
            product.restore()
            await self.uow.commit()
            return ProductDTO.from_entity(product)
