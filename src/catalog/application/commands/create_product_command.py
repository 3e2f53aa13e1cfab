"""
Create Product Command
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from shared.application.base_command import BaseCommand
from shared.application.command_handler import CommandHandler
from shared.infrastructure.observability.logger import get_logger
from catalog.application.dto.product_dto import ProductDTO
from catalog.domain.entities.product import Product
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateProductCommand(BaseCommand):
    """
    Command to create a product.

    Attributes:
        name: Product name
        description: Product description
        price: Initial price (> 0)
        image_file: Image reference
        categories: Initial categories
        stock_quantity: Initial stock
    """
    name: str
    description: str
    price: Decimal
    image_file: str
    categories: tuple[str, ...] = field(default_factory=tuple)
    stock_quantity: int = 0


class CreateProductHandler(CommandHandler[CreateProductCommand, ProductDTO]):
    """Validates through Product.create and persists the new product."""

    def __init__(self, uow: CatalogUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            image_file=command.image_file,
            categories=command.categories,
            stock_quantity=command.stock_quantity,
        )

        async with self.uow:
            self.uow.products.add(product)
            await self.uow.commit()

        logger.info("Product created", product_id=str(product.id), name=product.name)
        return ProductDTO.from_entity(product)
