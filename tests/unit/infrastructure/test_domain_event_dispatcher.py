from __future__ import annotations

from dataclasses import dataclass

import pytest

from shared.domain.domain_event import DomainEvent
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher

pytestmark = pytest.mark.anyio


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    number: int


@dataclass(frozen=True)
class RushOrderPlaced(OrderPlaced):
    pass


async def test_handlers_run_in_registration_order():
    dispatcher = DomainEventDispatcher()
    calls = []

    async def first(event):
        calls.append(("first", event.number))

    async def second(event):
        calls.append(("second", event.number))

    dispatcher.register(OrderPlaced, first)
    dispatcher.register(OrderPlaced, second)

    await dispatcher.publish(OrderPlaced(number=7))

    assert calls == [("first", 7), ("second", 7)]


async def test_failing_handler_does_not_stop_the_others():
    dispatcher = DomainEventDispatcher()
    calls = []

    async def broken(event):
        raise RuntimeError("boom")

    async def healthy(event):
        calls.append(event.number)

    dispatcher.register(OrderPlaced, broken)
    dispatcher.register(OrderPlaced, healthy)

    await dispatcher.publish(OrderPlaced(number=1))

    assert calls == [1]


async def test_routing_matches_exact_type_only():
    dispatcher = DomainEventDispatcher()
    calls = []

    async def handler(event):
        calls.append(type(event).__name__)

    dispatcher.register(OrderPlaced, handler)

    await dispatcher.publish(RushOrderPlaced(number=2))
    await dispatcher.publish(OrderPlaced(number=3))

    assert calls == ["OrderPlaced"]


async def test_publish_without_handlers_is_a_noop():
    await DomainEventDispatcher().publish(OrderPlaced(number=1))


async def test_spawned_dispatch_continues_after_failures_and_drains():
    dispatcher = DomainEventDispatcher()
    calls = []

    async def handler(event):
        if event.number == 1:
            raise ValueError("first fails")
        calls.append(event.number)

    dispatcher.register(OrderPlaced, handler)

    dispatcher.spawn([OrderPlaced(number=1), OrderPlaced(number=2), OrderPlaced(number=3)])
    await dispatcher.drain()

    assert calls == [2, 3]
    assert dispatcher.pending_tasks == 0
