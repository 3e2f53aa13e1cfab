"""
Basket Module Registration
Wires basket handlers into the mediator, the dispatcher and the message bus
"""
from __future__ import annotations

from typing import Callable

from fastapi import APIRouter

from shared.application.mediator import Mediator
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher
from shared.infrastructure.observability.logger import get_logger
from shared.messaging.events import ProductPriceChangedIntegrationEvent
from shared.messaging.message_bus import MessageBus
from basket.api.routes import router
from basket.application.commands import (
    AddItemToBasketCommand,
    AddItemToBasketHandler,
    ApplyBasketDiscountCommand,
    ApplyBasketDiscountHandler,
    CheckoutBasketCommand,
    CheckoutBasketHandler,
    ClearBasketCommand,
    ClearBasketHandler,
    CreateBasketCommand,
    CreateBasketHandler,
    DeleteBasketCommand,
    DeleteBasketHandler,
    RemoveItemFromBasketCommand,
    RemoveItemFromBasketHandler,
    UpdateItemPriceInBasketCommand,
    UpdateItemPriceInBasketHandler,
    UpdateItemQuantityCommand,
    UpdateItemQuantityHandler,
)
from basket.application.event_handlers import CartActivityLogHandler
from basket.application.integration_event_handlers import ProductPriceChangedConsumer
from basket.application.queries import (
    GetBasketHandler,
    GetBasketQuery,
    GetBasketsByProductHandler,
    GetBasketsByProductQuery,
    GetBasketsForUserHandler,
    GetBasketsForUserQuery,
)
from basket.domain.events import (
    ShoppingCartCheckedOutEvent,
    ShoppingCartClearedEvent,
    ShoppingCartCreatedEvent,
)
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork

logger = get_logger(__name__)

BasketUnitOfWorkFactory = Callable[[], BasketUnitOfWork]


def register_basket_module(
    mediator: Mediator,
    dispatcher: DomainEventDispatcher,
    bus: MessageBus,
    uow_factory: BasketUnitOfWorkFactory,
) -> APIRouter:
    """
    Register every basket command, query, domain event handler and bus consumer.

    Returns:
        The basket API router
    """
    handlers = {
        CreateBasketCommand: CreateBasketHandler,
        AddItemToBasketCommand: AddItemToBasketHandler,
        RemoveItemFromBasketCommand: RemoveItemFromBasketHandler,
        UpdateItemQuantityCommand: UpdateItemQuantityHandler,
        ApplyBasketDiscountCommand: ApplyBasketDiscountHandler,
        ClearBasketCommand: ClearBasketHandler,
        CheckoutBasketCommand: CheckoutBasketHandler,
        DeleteBasketCommand: DeleteBasketHandler,
        UpdateItemPriceInBasketCommand: UpdateItemPriceInBasketHandler,
        GetBasketQuery: GetBasketHandler,
        GetBasketsForUserQuery: GetBasketsForUserHandler,
        GetBasketsByProductQuery: GetBasketsByProductHandler,
    }
    for message_type, handler_type in handlers.items():
        mediator.register(message_type, lambda handler_type=handler_type: handler_type(uow_factory()))

    activity_log = CartActivityLogHandler()
    for event_type in (ShoppingCartCreatedEvent, ShoppingCartClearedEvent, ShoppingCartCheckedOutEvent):
        dispatcher.register(event_type, activity_log)

    bus.subscribe(ProductPriceChangedIntegrationEvent, ProductPriceChangedConsumer(mediator))

    logger.info("Basket module registered", handlers=len(handlers))
    return router
