"""
Catalog Module Registration
Wires catalog handlers into the mediator and the domain event dispatcher
"""
from __future__ import annotations

from typing import Callable

from fastapi import APIRouter

from shared.application.mediator import Mediator
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher
from shared.infrastructure.observability.logger import get_logger
from shared.messaging.message_bus import MessageBus
from catalog.api.routes import router
from catalog.application.commands import (
    AddProductCategoriesCommand,
    AddProductCategoriesHandler,
    ApplyProductDiscountCommand,
    ApplyProductDiscountHandler,
    CreateProductCommand,
    CreateProductHandler,
    DeleteProductCommand,
    DeleteProductHandler,
    RemoveProductCategoryCommand,
    RemoveProductCategoryHandler,
    RestoreProductCommand,
    RestoreProductHandler,
    UpdateProductCommand,
    UpdateProductHandler,
    UpdateProductPriceCommand,
    UpdateProductPriceHandler,
    UpdateProductStockCommand,
    UpdateProductStockHandler,
)
from catalog.application.event_handlers import ProductLifecycleLogHandler, ProductPriceChangedBridgeHandler
from catalog.application.queries import (
    GetProductByIdHandler,
    GetProductByIdQuery,
    GetProductsHandler,
    GetProductsQuery,
)
from catalog.domain.events import (
    ProductCategoriesUpdatedEvent,
    ProductCreatedEvent,
    ProductDeletedEvent,
    ProductPriceChangedEvent,
    ProductRestoredEvent,
)
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork

logger = get_logger(__name__)

CatalogUnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


def register_catalog_module(
    mediator: Mediator,
    dispatcher: DomainEventDispatcher,
    bus: MessageBus,
    uow_factory: CatalogUnitOfWorkFactory,
) -> APIRouter:
    """
    Register every catalog command, query and domain event handler.

    Returns:
        The catalog API router
    """
    handlers = {
        CreateProductCommand: CreateProductHandler,
        UpdateProductCommand: UpdateProductHandler,
        UpdateProductPriceCommand: UpdateProductPriceHandler,
        UpdateProductStockCommand: UpdateProductStockHandler,
        ApplyProductDiscountCommand: ApplyProductDiscountHandler,
        AddProductCategoriesCommand: AddProductCategoriesHandler,
        RemoveProductCategoryCommand: RemoveProductCategoryHandler,
        DeleteProductCommand: DeleteProductHandler,
        RestoreProductCommand: RestoreProductHandler,
        GetProductByIdQuery: GetProductByIdHandler,
        GetProductsQuery: GetProductsHandler,
    }
    for message_type, handler_type in handlers.items():
        mediator.register(message_type, lambda handler_type=handler_type: handler_type(uow_factory()))

    dispatcher.register(ProductPriceChangedEvent, ProductPriceChangedBridgeHandler(bus))

    lifecycle_log = ProductLifecycleLogHandler()
    for event_type in (
        ProductCreatedEvent,
        ProductCategoriesUpdatedEvent,
        ProductDeletedEvent,
        ProductRestoredEvent,
    ):
        dispatcher.register(event_type, lifecycle_log)

    logger.info("Catalog module registered", handlers=len(handlers))
    return router
