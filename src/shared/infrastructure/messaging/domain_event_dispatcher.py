"""
Domain Event Dispatcher
In-process, exact-type routing of domain events to registered handlers
"""
from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Awaitable, Callable, Iterable, Type, TypeVar

from shared.domain.domain_event import DomainEvent
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)
EventHandler = Callable[[TEvent], Awaitable[None]]


def _handler_name(handler: Callable[..., object]) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__


class DomainEventDispatcher:
    """
    Explicit event-type → handler-list table built at startup.

    A handler is invoked only for the exact class it was registered for;
    subclasses are not matched. Handlers run one after another in
    registration order and a failing handler never stops the others.

    Attributes:
        _handlers: Registered handlers keyed by event class
        _background: Dispatch tasks started in detached mode (kept referenced until done)
    """

    def __init__(self) -> None:
        self._handlers: dict[Type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._background: set[asyncio.Task[None]] = set()

    def register(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        """
        Register a handler for one concrete event class.

        Args:
            event_type: Concrete DomainEvent subclass
            handler: Async callable receiving the immutable event
        """
        self._handlers[event_type].append(handler)
        logger.debug(
            "Handler registered",
            event_type=event_type.__name__,
            handler=_handler_name(handler),
        )

    def handlers_for(self, event_type: Type[DomainEvent]) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(event_type, ()))

    async def publish(self, event: DomainEvent) -> None:
        """
        Deliver one event to every handler registered for its exact type.

        Handler exceptions are logged and swallowed; cancellation propagates.

        Args:
            event: Domain event to publish
        """
        handlers = self.handlers_for(type(event))
        if not handlers:
            logger.debug("No handlers for event", event_type=event.event_type, event_id=str(event.event_id))
            return

        logger.info(
            "Publishing domain event",
            event_type=event.event_type,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Domain event handler failed",
                    event_type=event.event_type,
                    event_id=str(event.event_id),
                    handler=_handler_name(handler),
                    error=str(e),
                    exc_info=True,
                )

    async def publish_many(self, events: Iterable[DomainEvent]) -> None:
        """
        Publish events one at a time, in order.

        A failure escaping ``publish`` for one event is logged with the event
        type and does not stop the remaining events.
        """
        for event in events:
            try:
                await self.publish(event)
            except Exception as e:
                logger.error(
                    "Domain event dispatch failed",
                    event_type=event.event_type,
                    event_id=str(event.event_id),
                    error=str(e),
                )

    def spawn(self, events: list[DomainEvent]) -> asyncio.Task[None]:
        """Start ``publish_many`` as a background task and keep it referenced."""
        task = asyncio.create_task(self.publish_many(events))
        self._background.add(task)
        task.add_done_callback(self._background.discard)
        return task

    @property
    def pending_tasks(self) -> int:
        return len(self._background)

    async def drain(self) -> None:
        """Wait for every background dispatch started so far (shutdown, tests)."""
        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)
