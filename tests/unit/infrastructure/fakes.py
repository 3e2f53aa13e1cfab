from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import UUID

from shared.domain.base_aggregate_root import BaseAggregateRoot
from shared.domain.base_entity import SoftDeletable
from shared.domain.domain_event import DomainEvent
from shared.infrastructure.database.base_mapper import AggregateMapper


@dataclass(frozen=True)
class WidgetRenamed(DomainEvent):
    widget_id: UUID
    name: str


class Widget(BaseAggregateRoot, SoftDeletable):
    def __init__(self, id: Optional[UUID] = None, name: str = "widget") -> None:
        super().__init__(id)
        self.name = name
        self.is_deleted = False
        self.deleted_at = None
        self.deleted_by = None

    def rename(self, name: str) -> None:
        self.name = name
        self.add_domain_event(WidgetRenamed(widget_id=self.id, name=name))

    def soft_delete(self) -> None:
        self.is_deleted = True


class Gadget(BaseAggregateRoot):
    """Physically deletable aggregate."""


@dataclass
class Row:
    id: UUID
    name: str = ""
    is_deleted: bool = False
    created_at: Any = None
    created_by: Any = None
    last_modified_at: Any = None
    last_modified_by: Any = None
    deleted_at: Any = None
    deleted_by: Any = None


class WidgetMapper(AggregateMapper[Widget, Any]):
    model_type = Row

    def to_model(self, aggregate: Widget) -> Row:
        row = Row(id=aggregate.id)
        self.apply(aggregate, row)
        return row

    def to_domain(self, model: Row) -> Widget:
        return Widget(id=model.id, name=model.name)

    def apply(self, aggregate: Widget, model: Row) -> None:
        model.name = aggregate.name
        self.copy_audit(aggregate, model)

    def snapshot(self, aggregate: Widget) -> Any:
        return (aggregate.name, aggregate.is_deleted)


class GadgetMapper(AggregateMapper[Gadget, Any]):
    model_type = Row

    def to_model(self, aggregate: Gadget) -> Row:
        return Row(id=aggregate.id)

    def to_domain(self, model: Row) -> Gadget:
        return Gadget(id=model.id)

    def apply(self, aggregate: Gadget, model: Row) -> None:
        self.copy_audit(aggregate, model)

    def snapshot(self, aggregate: Gadget) -> Any:
        return ()


@dataclass
class FakeSession:
    """Just enough of AsyncSession for the unit of work."""

    store: dict[UUID, Row] = field(default_factory=dict)
    fail_commit: bool = False
    commit_gate: Optional[asyncio.Event] = None
    added: list[Row] = field(default_factory=list)
    deleted: list[Row] = field(default_factory=list)
    commits: int = 0
    rollbacks: int = 0
    closed: bool = False
    _in_tx: bool = False

    def add(self, model: Row) -> None:
        self._in_tx = True
        self.added.append(model)

    async def get(self, model_type: Any, ident: UUID, options: Any = None) -> Optional[Row]:
        self._in_tx = True
        return self.store.get(ident)

    async def delete(self, model: Row) -> None:
        self.deleted.append(model)

    async def flush(self) -> None:
        return None

    async def commit(self) -> None:
        if self.commit_gate is not None:
            await self.commit_gate.wait()
        if self.fail_commit:
            raise RuntimeError("simulated storage failure")
        for row in self.added:
            self.store[row.id] = row
        for row in self.deleted:
            self.store.pop(row.id, None)
        self.added.clear()
        self.deleted.clear()
        self.commits += 1
        self._in_tx = False

    async def rollback(self) -> None:
        self.added.clear()
        self.deleted.clear()
        self.rollbacks += 1
        self._in_tx = False

    async def close(self) -> None:
        self.closed = True

    def in_transaction(self) -> bool:
        return self._in_tx
