"""
Aggregate Root Base Class
Manages domain events and acts as consistency boundary
"""
from __future__ import annotations

from typing import Any
from uuid import UUID

from shared.domain.base_entity import BaseEntity
from shared.domain.domain_event import DomainEvent


class BaseAggregateRoot(BaseEntity):
    """
    Base class for aggregate roots.

    Aggregate roots are entities that serve as the entry point to an aggregate.
    They keep an ordered buffer of domain events raised by their own methods.
    The buffer is drained by the save interceptor during a unit of work
    commit; the aggregate itself never dispatches anything.

    Attributes:
        _domain_events: Pending (undrained) domain events, in raise order
    """

    def __init__(self, id: UUID | None = None, **kwargs: Any) -> None:
        """
        Initialize aggregate root.

        Args:
            id: Aggregate UUID
            **kwargs: Additional arguments for BaseEntity
        """
        super().__init__(id=id, **kwargs)
        self._domain_events: list[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        """
        Append a domain event to the pending buffer.

        Args:
            event: Domain event to add
        """
        self._domain_events.append(event)

    def drain_events(self) -> list[DomainEvent]:
        """
        Take every pending event and leave the buffer empty.

        Returns:
            Pending domain events in the order they were raised
        """
        events, self._domain_events = self._domain_events, []
        return events

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Read-only view of pending events."""
        return tuple(self._domain_events)

    @property
    def has_domain_events(self) -> bool:
        """Check if aggregate has unpublished events."""
        return len(self._domain_events) > 0
