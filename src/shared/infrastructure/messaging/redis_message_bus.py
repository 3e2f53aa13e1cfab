"""
Redis Streams Message Bus
At-least-once delivery through consumer groups, one stream per event type
"""
from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Any, Mapping, Optional, Type

from redis.asyncio import Redis
from redis.exceptions import RedisError, ResponseError

from shared.infrastructure.observability.logger import get_logger
from shared.messaging.integration_event import IntegrationEvent, from_message
from shared.messaging.message_bus import IntegrationEventConsumer, TIntegrationEvent

logger = get_logger(__name__)


def _field(fields: Mapping[Any, Any], name: str) -> Optional[str]:
    value = fields.get(name, fields.get(name.encode()))
    if isinstance(value, bytes):
        return value.decode()
    return value


def _decode(value: Any) -> str:
    return value.decode() if isinstance(value, bytes) else str(value)


class RedisStreamMessageBus:
    """
    Redis Streams implementation of the message bus.

    - ``publish``: XADD to ``{stream_prefix}:{eventType}``
    - consumer loop: XREADGROUP new messages; XACK once every consumer
      succeeded; failed messages stay pending
    - pending messages idle longer than ``claim_idle_ms`` are taken over
      with XAUTOCLAIM and redelivered
    - a message delivered more than ``max_deliveries`` times is acknowledged
      and logged as dead

    Attributes:
        redis: Async Redis client
        group: Consumer group name shared by every process
        consumer_name: Name of this process inside the group
    """

    def __init__(
        self,
        redis: Redis,
        *,
        stream_prefix: str = "shop:integration",
        group: str = "modular-shop",
        consumer_name: str = "consumer-1",
        block_ms: int = 5000,
        batch_size: int = 10,
        claim_idle_ms: int = 60000,
        max_deliveries: int = 5,
    ) -> None:
        self.redis = redis
        self.stream_prefix = stream_prefix
        self.group = group
        self.consumer_name = consumer_name
        self.block_ms = block_ms
        self.batch_size = batch_size
        self.claim_idle_ms = claim_idle_ms
        self.max_deliveries = max_deliveries

        self._consumers: dict[Type[IntegrationEvent], list[IntegrationEventConsumer]] = defaultdict(list)
        self._task: Optional[asyncio.Task[None]] = None

    def stream_for(self, event_type: str) -> str:
        return f"{self.stream_prefix}:{event_type}"

    @property
    def streams(self) -> list[str]:
        return [self.stream_for(event_type.__name__) for event_type in self._consumers]

    async def publish(self, event: IntegrationEvent) -> None:
        """
        Append the event to its stream.

        Raises:
            RedisError: If the XADD fails
        """
        stream = self.stream_for(event.event_type)
        message_id = await self.redis.xadd(stream, {"type": event.event_type, "payload": event.to_json()})
        logger.info(
            "Integration event published",
            event_type=event.event_type,
            event_id=str(event.event_id),
            stream=stream,
            message_id=_decode(message_id),
        )

    def subscribe(
        self,
        event_type: Type[TIntegrationEvent],
        consumer: IntegrationEventConsumer[TIntegrationEvent],
    ) -> None:
        self._consumers[event_type].append(consumer)

    async def ensure_groups(self) -> None:
        for stream in self.streams:
            try:
                await self.redis.xgroup_create(stream, self.group, id="0", mkstream=True)
                logger.info("Consumer group created", stream=stream, group=self.group)
            except ResponseError as e:
                if "BUSYGROUP" not in str(e):
                    raise

    async def start(self) -> None:
        if self._task is not None or not self._consumers:
            return
        await self.ensure_groups()
        self._task = asyncio.create_task(self._run())
        logger.info("Message bus consumer started", streams=self.streams, consumer=self.consumer_name)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Message bus consumer stopped", consumer=self.consumer_name)

    async def _run(self) -> None:
        while True:
            try:
                await self.poll_once()
            except RedisError as e:
                logger.error("Message bus poll failed", error=str(e))
                await asyncio.sleep(1)

    async def poll_once(self) -> int:
        """
        One consumer iteration: reclaim stale pending messages, then read new ones.

        Returns:
            Number of messages handled
        """
        handled = 0
        for stream in self.streams:
            handled += await self._reclaim(stream)

        response = await self.redis.xreadgroup(
            self.group,
            self.consumer_name,
            {stream: ">" for stream in self.streams},
            count=self.batch_size,
            block=self.block_ms,
        )
        for stream, messages in response or []:
            for message_id, fields in messages:
                await self._handle(_decode(stream), message_id, fields, deliveries=1)
                handled += 1
        return handled

    async def _reclaim(self, stream: str) -> int:
        result = await self.redis.xautoclaim(
            stream,
            self.group,
            self.consumer_name,
            min_idle_time=self.claim_idle_ms,
            start_id="0-0",
            count=self.batch_size,
        )
        messages = result[1] if result else []
        for message_id, fields in messages:
            deliveries = await self._delivery_count(stream, message_id)
            logger.info(
                "Redelivering pending message",
                stream=stream,
                message_id=_decode(message_id),
                deliveries=deliveries,
            )
            await self._handle(stream, message_id, fields, deliveries=deliveries)
        return len(messages)

    async def _delivery_count(self, stream: str, message_id: Any) -> int:
        pending = await self.redis.xpending_range(stream, self.group, min=message_id, max=message_id, count=1)
        if not pending:
            return 1
        return int(pending[0]["times_delivered"])

    async def _handle(self, stream: str, message_id: Any, fields: Mapping[Any, Any], deliveries: int) -> None:
        if deliveries > self.max_deliveries:
            logger.error(
                "Message dead after max deliveries",
                stream=stream,
                message_id=_decode(message_id),
                deliveries=deliveries,
            )
            await self.redis.xack(stream, self.group, message_id)
            return

        payload = _field(fields, "payload")
        try:
            if payload is None:
                raise ValueError("message has no payload")
            event = from_message(payload)
        except (LookupError, ValueError) as e:
            logger.error("Dropping unreadable message", stream=stream, message_id=_decode(message_id), error=str(e))
            await self.redis.xack(stream, self.group, message_id)
            return

        try:
            for consumer in self._consumers.get(type(event), []):
                await consumer(event)
        except Exception as e:
            logger.warning(
                "Consumer failed, message left pending",
                event_type=event.event_type,
                event_id=str(event.event_id),
                message_id=_decode(message_id),
                deliveries=deliveries,
                error=str(e),
            )
            return

        await self.redis.xack(stream, self.group, message_id)
        logger.debug(
            "Message acknowledged",
            event_type=event.event_type,
            event_id=str(event.event_id),
            message_id=_decode(message_id),
        )
