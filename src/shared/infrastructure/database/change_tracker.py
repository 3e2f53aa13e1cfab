"""
Change Tracker
Per unit-of-work identity map with added/modified/deleted classification
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type
from uuid import UUID

from shared.domain.base_aggregate_root import BaseAggregateRoot
from shared.infrastructure.database.base_mapper import AggregateMapper


class EntryState(str, Enum):
    ADDED = "added"
    UNCHANGED = "unchanged"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass
class TrackedEntry:
    """
    One aggregate known to the unit of work.

    Attributes:
        aggregate: The tracked aggregate root
        mapper: Mapper used to persist it
        state: Current classification
        original: Snapshot taken when loaded or last saved (None when added)
    """

    aggregate: BaseAggregateRoot
    mapper: AggregateMapper[Any, Any]
    state: EntryState
    original: Any = None

    def detect_changes(self) -> None:
        if self.state is EntryState.UNCHANGED and self.mapper.snapshot(self.aggregate) != self.original:
            self.state = EntryState.MODIFIED


class ChangeTracker:
    """
    Identity map of aggregates loaded or added through one unit of work.

    Entries keep insertion order, which is the order events are collected in.
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[Type[Any], UUID], TrackedEntry] = {}

    @staticmethod
    def _key(aggregate: BaseAggregateRoot) -> Tuple[Type[Any], UUID]:
        return type(aggregate), aggregate.id

    def find(self, aggregate_type: Type[Any], aggregate_id: UUID) -> Optional[BaseAggregateRoot]:
        entry = self._entries.get((aggregate_type, aggregate_id))
        return entry.aggregate if entry else None

    def track_loaded(self, aggregate: BaseAggregateRoot, mapper: AggregateMapper[Any, Any]) -> BaseAggregateRoot:
        """Start tracking a freshly loaded aggregate; returns the already tracked instance if any."""
        existing = self._entries.get(self._key(aggregate))
        if existing is not None:
            return existing.aggregate
        self._entries[self._key(aggregate)] = TrackedEntry(
            aggregate=aggregate,
            mapper=mapper,
            state=EntryState.UNCHANGED,
            original=mapper.snapshot(aggregate),
        )
        return aggregate

    def track_added(self, aggregate: BaseAggregateRoot, mapper: AggregateMapper[Any, Any]) -> None:
        key = self._key(aggregate)
        existing = self._entries.get(key)
        if existing is not None and existing.state is not EntryState.DELETED:
            raise ValueError(f"{type(aggregate).__name__} {aggregate.id} is already tracked")
        if existing is not None:
            # re-adding a removed aggregate keeps it as a modification of the stored row
            existing.state = EntryState.MODIFIED
            return
        self._entries[key] = TrackedEntry(aggregate=aggregate, mapper=mapper, state=EntryState.ADDED)

    def track_removed(self, aggregate: BaseAggregateRoot, mapper: AggregateMapper[Any, Any]) -> None:
        key = self._key(aggregate)
        existing = self._entries.get(key)
        if existing is None:
            self._entries[key] = TrackedEntry(
                aggregate=aggregate,
                mapper=mapper,
                state=EntryState.DELETED,
                original=mapper.snapshot(aggregate),
            )
        elif existing.state is EntryState.ADDED:
            del self._entries[key]
        else:
            existing.state = EntryState.DELETED

    def detect_changes(self) -> None:
        for entry in self._entries.values():
            entry.detect_changes()

    def entries(self) -> List[TrackedEntry]:
        return list(self._entries.values())

    def accept_all_changes(self) -> None:
        """Reset every entry to UNCHANGED after a successful commit."""
        for key, entry in list(self._entries.items()):
            if entry.state is EntryState.DELETED:
                del self._entries[key]
                continue
            entry.state = EntryState.UNCHANGED
            entry.original = entry.mapper.snapshot(entry.aggregate)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
