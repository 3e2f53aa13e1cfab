"""
Shared Messaging Infrastructure
In-process domain event dispatch and message bus clients
"""
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher
from shared.infrastructure.messaging.in_memory_message_bus import InMemoryMessageBus
from shared.infrastructure.messaging.redis_message_bus import RedisStreamMessageBus

__all__ = [
    "DomainEventDispatcher",
    "InMemoryMessageBus",
    "RedisStreamMessageBus",
]
