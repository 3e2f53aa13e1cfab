"""
Product Lifecycle Log Handler
"""
from __future__ import annotations

from shared.domain.domain_event import DomainEvent
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class ProductLifecycleLogHandler:
    """Writes one structured log line per product lifecycle event."""

    async def __call__(self, event: DomainEvent) -> None:
        logger.info("Product lifecycle event", **event.to_dict())
