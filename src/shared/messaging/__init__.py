"""
Shared Messaging Contracts
Integration events and the message bus protocol
"""
from shared.messaging.events import ProductPriceChangedIntegrationEvent
from shared.messaging.integration_event import (
    IntegrationEvent,
    from_message,
    integration_event,
    resolve_event_type,
)
from shared.messaging.message_bus import IntegrationEventConsumer, MessageBus

__all__ = [
    "IntegrationEvent",
    "IntegrationEventConsumer",
    "MessageBus",
    "ProductPriceChangedIntegrationEvent",
    "from_message",
    "integration_event",
    "resolve_event_type",
]
