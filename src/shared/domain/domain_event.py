"""
Domain Event Base Class
All domain events inherit from this
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Base class for all domain events.

    Domain events represent something that happened inside an aggregate.
    They are immutable, live only between "raise" and "dispatch", and are
    never stored.

    Attributes:
        event_id: Unique identifier for this event occurrence
        occurred_on: UTC timestamp set when the event is constructed
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_on: datetime = field(default_factory=utc_now)

    @property
    def event_type(self) -> str:
        """Type tag used for routing and logging."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        """
        Convert event to a plain dictionary (for logging).

        Returns:
            Dictionary representation of event
        """
        data: dict[str, Any] = {"event_type": self.event_type}
        for key, value in self.__dict__.items():
            if isinstance(value, (UUID, Decimal)):
                data[key] = str(value)
            elif isinstance(value, datetime):
                data[key] = value.isoformat()
            elif isinstance(value, tuple):
                data[key] = list(value)
            else:
                data[key] = value
        return data
