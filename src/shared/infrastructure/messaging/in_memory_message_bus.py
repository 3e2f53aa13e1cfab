"""
In-Memory Message Bus
Single-process bus backed by an asyncio.Queue (tests, local runs)
"""
from __future__ import annotations

import asyncio
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional, Type

from shared.infrastructure.observability.logger import get_logger
from shared.messaging.integration_event import IntegrationEvent, from_message
from shared.messaging.message_bus import IntegrationEventConsumer, TIntegrationEvent

logger = get_logger(__name__)


@dataclass
class _Envelope:
    event_type: str
    payload: str
    deliveries: int = 0


class InMemoryMessageBus:
    """
    Message bus that round-trips every event through its JSON wire shape.

    A consumer failure puts the message back on the queue until it has been
    delivered ``max_deliveries`` times; after that it is dropped and logged.

    Attributes:
        published: Every event handed to ``publish``, in order
        _queue: Pending envelopes
        _consumers: Consumers keyed by integration event class
    """

    def __init__(self, max_deliveries: int = 5) -> None:
        self.max_deliveries = max_deliveries
        self.published: list[IntegrationEvent] = []
        self._queue: asyncio.Queue[_Envelope] = asyncio.Queue()
        self._consumers: dict[Type[IntegrationEvent], list[IntegrationEventConsumer]] = defaultdict(list)
        self._worker: Optional[asyncio.Task[None]] = None

    async def publish(self, event: IntegrationEvent) -> None:
        self.published.append(event)
        await self._queue.put(_Envelope(event_type=event.event_type, payload=event.to_json()))
        logger.info(
            "Integration event published",
            event_type=event.event_type,
            event_id=str(event.event_id),
            bus="memory",
        )

    def subscribe(
        self,
        event_type: Type[TIntegrationEvent],
        consumer: IntegrationEventConsumer[TIntegrationEvent],
    ) -> None:
        self._consumers[event_type].append(consumer)

    async def start(self) -> None:
        if self._worker is None:
            self._worker = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._worker is None:
            return
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None

    async def join(self) -> None:
        """Wait until every queued message (including redeliveries) is settled."""
        await self._queue.join()

    async def _run(self) -> None:
        while True:
            envelope = await self._queue.get()
            try:
                await self.deliver(envelope)
            finally:
                self._queue.task_done()

    async def deliver(self, envelope: _Envelope) -> bool:
        """
        Deliver one envelope to its consumers.

        Returns:
            True when the message is settled (acknowledged or dead)
        """
        envelope.deliveries += 1
        try:
            event = from_message(envelope.payload)
        except (LookupError, ValueError) as e:
            logger.error("Dropping unreadable message", event_type=envelope.event_type, error=str(e))
            return True

        consumers = self._consumers.get(type(event), [])
        try:
            for consumer in consumers:
                await consumer(event)
        except Exception as e:
            if envelope.deliveries >= self.max_deliveries:
                logger.error(
                    "Message dead after max deliveries",
                    event_type=envelope.event_type,
                    event_id=str(event.event_id),
                    deliveries=envelope.deliveries,
                    error=str(e),
                )
                return True
            logger.warning(
                "Consumer failed, message requeued",
                event_type=envelope.event_type,
                event_id=str(event.event_id),
                deliveries=envelope.deliveries,
                error=str(e),
            )
            self._queue.put_nowait(envelope)
            return False

        logger.debug(
            "Message acknowledged",
            event_type=envelope.event_type,
            event_id=str(event.event_id),
            consumers=len(consumers),
        )
        return True
