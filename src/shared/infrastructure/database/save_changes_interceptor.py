"""
Save Changes Interceptor
Audit stamping, soft-delete conversion and domain event collection around commit
"""
from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, Sequence

from shared.config import DispatchMode
from shared.domain.base_entity import SoftDeletable
from shared.domain.domain_event import DomainEvent, utc_now
from shared.infrastructure.database.change_tracker import EntryState, TrackedEntry
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher
from shared.infrastructure.observability.logger import get_logger
from shared.request_context import get_actor

logger = get_logger(__name__)


class SaveChangesInterceptor:
    """
    Hooks run by the unit of work on every commit.

    - ``saving_changes``: before the storage commit. Converts removal of
      soft-deletable aggregates into a modification, stamps audit fields and
      moves every tracked aggregate's pending events into the accumulator.
    - ``saved_changes``: after a successful commit. Dispatches the
      accumulated events in the configured mode.
    - ``save_changes_failed``: after a failed commit. Drops the accumulator.

    One interceptor belongs to one unit of work, so the accumulator is
    per save cycle.

    Attributes:
        _dispatcher: In-process domain event dispatcher
        _mode: WAIT (commit awaits dispatch) or DETACHED (background task)
        _pending: Events collected in the current cycle
    """

    def __init__(
        self,
        dispatcher: DomainEventDispatcher,
        *,
        dispatch_mode: DispatchMode = DispatchMode.WAIT,
        default_actor: str = "system",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._dispatcher = dispatcher
        self._mode = dispatch_mode
        self._default_actor = default_actor
        self._clock = clock
        self._pending: list[DomainEvent] = []

    @property
    def collected_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._pending)

    def _current_actor(self) -> str:
        return get_actor() or self._default_actor

    def saving_changes(self, entries: Sequence[TrackedEntry]) -> list[DomainEvent]:
        """
        Pre-commit pass over the tracked entries.

        Args:
            entries: Tracked entries, already classified by ``detect_changes``

        Returns:
            Events collected so far in this cycle, in collection order
        """
        now = self._clock()
        actor = self._current_actor()

        for entry in entries:
            aggregate = entry.aggregate

            if entry.state is EntryState.DELETED and isinstance(aggregate, SoftDeletable):
                aggregate.soft_delete()
                entry.state = EntryState.MODIFIED

            if entry.state is EntryState.ADDED:
                aggregate.stamp_created(now, actor)
            elif entry.state is EntryState.MODIFIED:
                aggregate.stamp_modified(now, actor)
            else:
                continue

            if isinstance(aggregate, SoftDeletable) and aggregate.is_deleted and aggregate.deleted_at is None:
                aggregate.stamp_deleted(now, actor)

        for entry in entries:
            self._pending.extend(entry.aggregate.drain_events())

        logger.debug(
            "Domain events collected",
            entries=len(entries),
            collected=len(self._pending),
        )
        return list(self._pending)

    async def saved_changes(self) -> None:
        """Dispatch the accumulated events after a successful commit."""
        events, self._pending = self._pending, []
        if not events:
            return

        logger.info(
            "Dispatching domain events",
            count=len(events),
            mode=self._mode.value,
        )

        task = self._dispatcher.spawn(events)
        if self._mode is DispatchMode.WAIT:
            # the dispatch itself survives cancellation of the caller
            await asyncio.shield(task)

    def save_changes_failed(self, error: BaseException) -> None:
        """Discard the accumulator; nothing collected in this cycle is dispatched."""
        discarded = len(self._pending)
        self._pending.clear()
        logger.warning(
            "Save failed, domain events discarded",
            discarded=discarded,
            error=str(error),
            error_type=type(error).__name__,
        )
