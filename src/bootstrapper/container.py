"""
Application Container
Builds the shared infrastructure once and registers every module against it
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from fastapi import APIRouter
from redis.asyncio import Redis

from shared.application.mediator import Mediator
from shared.config import MessageBusKind, Settings
from shared.infrastructure.database.session import DatabaseSessionFactory
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher
from shared.infrastructure.messaging.in_memory_message_bus import InMemoryMessageBus
from shared.infrastructure.messaging.redis_message_bus import RedisStreamMessageBus
from shared.infrastructure.observability.logger import get_logger
from shared.messaging.message_bus import MessageBus
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork
from basket.module import register_basket_module
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork
from catalog.module import register_catalog_module

logger = get_logger(__name__)


@dataclass
class Container:
    """
    Process-wide services shared by every request.

    Units of work are not held here: ``catalog_uow()`` and ``basket_uow()``
    build a fresh one for every handler.
    """

    settings: Settings
    database: DatabaseSessionFactory
    dispatcher: DomainEventDispatcher
    bus: MessageBus
    mediator: Mediator
    redis: Optional[Redis] = None
    routers: list[APIRouter] = field(default_factory=list)

    def catalog_uow(self) -> CatalogUnitOfWork:
        return CatalogUnitOfWork(
            self.database,
            self.dispatcher,
            dispatch_mode=self.settings.DISPATCH_MODE,
            default_actor=self.settings.AUDIT_DEFAULT_USER,
        )

    def basket_uow(self) -> BasketUnitOfWork:
        return BasketUnitOfWork(
            self.database,
            self.dispatcher,
            dispatch_mode=self.settings.DISPATCH_MODE,
            default_actor=self.settings.AUDIT_DEFAULT_USER,
        )

    async def start(self) -> None:
        """Create sqlite tables when needed, then start consuming the bus."""
        if self.database.is_sqlite:
            await self.database.create_all()
        await self.bus.start()
        logger.info("Container started", bus=type(self.bus).__name__)

    async def stop(self) -> None:
        """Stop consuming, let detached dispatches finish, release connections."""
        await self.bus.stop()
        await self.dispatcher.drain()
        await self.database.dispose()
        if self.redis is not None:
            await self.redis.aclose()
        logger.info("Container stopped")


def build_message_bus(settings: Settings) -> tuple[MessageBus, Optional[Redis]]:
    if settings.MESSAGE_BUS is MessageBusKind.MEMORY:
        return InMemoryMessageBus(max_deliveries=settings.BUS_MAX_DELIVERIES), None

    redis = Redis.from_url(settings.REDIS_URL, decode_responses=True)
    bus = RedisStreamMessageBus(
        redis,
        stream_prefix=settings.BUS_STREAM_PREFIX,
        group=settings.BUS_CONSUMER_GROUP,
        consumer_name=settings.BUS_CONSUMER_NAME,
        block_ms=settings.BUS_BLOCK_MS,
        batch_size=settings.BUS_BATCH_SIZE,
        claim_idle_ms=settings.BUS_CLAIM_IDLE_MS,
        max_deliveries=settings.BUS_MAX_DELIVERIES,
    )
    return bus, redis


def build_container(settings: Settings, bus: Optional[MessageBus] = None) -> Container:
    """
    Wire the application.

    Args:
        settings: Application settings
        bus: Message bus to use instead of the one ``settings`` selects (tests)
    """
    redis: Optional[Redis] = None
    if bus is None:
        bus, redis = build_message_bus(settings)

    database = DatabaseSessionFactory(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )
    container = Container(
        settings=settings,
        database=database,
        dispatcher=DomainEventDispatcher(),
        bus=bus,
        mediator=Mediator(),
        redis=redis,
    )

    container.routers.append(
        register_catalog_module(container.mediator, container.dispatcher, bus, container.catalog_uow)
    )
    container.routers.append(
        register_basket_module(container.mediator, container.dispatcher, bus, container.basket_uow)
    )

    logger.info(
        "Container built",
        environment=settings.ENVIRONMENT,
        message_bus=settings.MESSAGE_BUS.value,
        dispatch_mode=settings.DISPATCH_MODE.value,
    )
    return container
