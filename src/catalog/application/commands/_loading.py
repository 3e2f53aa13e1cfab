"""
Shared loading helper for product command handlers
"""
from __future__ import annotations

from uuid import UUID

from catalog.domain.entities.product import Product
from catalog.domain.exceptions import ProductNotFoundError
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork


async def load_product(uow: CatalogUnitOfWork, product_id: UUID, include_deleted: bool = False) -> Product:
    product = await uow.products.get(product_id, include_deleted=include_deleted)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product
