"""
Message Bus Contract
At-least-once, unordered delivery of integration events between modules
"""
from __future__ import annotations

from typing import Awaitable, Callable, Protocol, Type, TypeVar, runtime_checkable

from shared.messaging.integration_event import IntegrationEvent

TIntegrationEvent = TypeVar("TIntegrationEvent", bound=IntegrationEvent)
IntegrationEventConsumer = Callable[[TIntegrationEvent], Awaitable[None]]


@runtime_checkable
class MessageBus(Protocol):
    """
    Message bus client used by bridge handlers and consumers.

    A consumer that raises leaves the message unacknowledged so the bus
    redelivers it; consumers must therefore be idempotent.
    """

    async def publish(self, event: IntegrationEvent) -> None: ...

    def subscribe(self, event_type: Type[TIntegrationEvent], consumer: IntegrationEventConsumer[TIntegrationEvent]) -> None: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
