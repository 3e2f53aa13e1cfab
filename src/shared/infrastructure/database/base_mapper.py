"""
Aggregate ↔ ORM Mapper Contract
Each module implements one mapper per aggregate root
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, Type, TypeVar

from shared.domain.base_aggregate_root import BaseAggregateRoot
from shared.infrastructure.database.base_model import Base

TAggregate = TypeVar("TAggregate", bound=BaseAggregateRoot)
TModel = TypeVar("TModel", bound=Base)


class AggregateMapper(ABC, Generic[TAggregate, TModel]):
    """
    Converts one aggregate type to and from its ORM model graph.

    Mappers are the only place that knows both the domain shape and the
    table shape. ``to_domain`` must go through the aggregate's ``rehydrate``
    factory so no events are recorded on load.

    Attributes:
        model_type: ORM model class of the aggregate root table
    """

    model_type: Type[TModel]

    @abstractmethod
    def to_model(self, aggregate: TAggregate) -> TModel:
        """Build a new ORM graph for an aggregate being added."""

    @abstractmethod
    def to_domain(self, model: TModel) -> TAggregate:
        """Rehydrate an aggregate from a loaded ORM graph."""

    @abstractmethod
    def apply(self, aggregate: TAggregate, model: TModel) -> None:
        """Copy aggregate state onto an already persisted ORM graph."""

    @abstractmethod
    def snapshot(self, aggregate: TAggregate) -> Any:
        """
        Return a comparable value of the persisted state.

        Two snapshots compare equal iff nothing needs to be written.
        """

    def load_options(self) -> Sequence[Any]:
        """Loader options (e.g. ``selectinload``) applied when fetching the root."""
        return ()

    @staticmethod
    def copy_audit(source: Any, target: Any) -> None:
        """Copy audit (and soft-delete) fields between an aggregate and a model."""
        for name in ("created_at", "created_by", "last_modified_at", "last_modified_by"):
            setattr(target, name, getattr(source, name))
        if hasattr(source, "is_deleted") and hasattr(target, "is_deleted"):
            for name in ("is_deleted", "deleted_at", "deleted_by"):
                setattr(target, name, getattr(source, name))
