from __future__ import annotations

from typing import AsyncIterator, Callable

import pytest

from shared.config import MessageBusKind, Settings
from shared.infrastructure.database.session import DatabaseSessionFactory
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher
from shared.infrastructure.messaging.in_memory_message_bus import InMemoryMessageBus
from basket.infrastructure.basket_unit_of_work import BasketUnitOfWork
from catalog.infrastructure.catalog_unit_of_work import CatalogUnitOfWork

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL=SQLITE_URL,
        MESSAGE_BUS=MessageBusKind.MEMORY,
        LOG_LEVEL="WARNING",
        JSON_LOGS=False,
        AUDIT_DEFAULT_USER="test-system",
    )


@pytest.fixture
async def database() -> AsyncIterator[DatabaseSessionFactory]:
    db = DatabaseSessionFactory(SQLITE_URL)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def dispatcher() -> DomainEventDispatcher:
    return DomainEventDispatcher()


@pytest.fixture
def bus() -> InMemoryMessageBus:
    return InMemoryMessageBus(max_deliveries=3)


@pytest.fixture
def catalog_uow_factory(
    database: DatabaseSessionFactory, dispatcher: DomainEventDispatcher
) -> Callable[[], CatalogUnitOfWork]:
    return lambda: CatalogUnitOfWork(database, dispatcher, default_actor="test-system")


@pytest.fixture
def basket_uow_factory(
    database: DatabaseSessionFactory, dispatcher: DomainEventDispatcher
) -> Callable[[], BasketUnitOfWork]:
    return lambda: BasketUnitOfWork(database, dispatcher, default_actor="test-system")
