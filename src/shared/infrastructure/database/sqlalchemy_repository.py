"""
SQLAlchemy Aggregate Repository
Loads aggregates into the unit of work's change tracker
"""
from __future__ import annotations

from typing import Any, Generic, Optional
from uuid import UUID

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.infrastructure.database.base_mapper import AggregateMapper, TAggregate, TModel
from shared.infrastructure.database.change_tracker import ChangeTracker
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class SQLAlchemyAggregateRepository(Generic[TAggregate, TModel]):
    """
    Generic async repository for one aggregate type.

    ``add`` and ``remove`` only register intent with the change tracker;
    nothing reaches the database until the unit of work commits.

    Type Parameters:
        TAggregate: Domain aggregate root type
        TModel: SQLAlchemy ORM model type

    Attributes:
        session: Async SQLAlchemy session of the owning unit of work
        tracker: Change tracker of the owning unit of work
        mapper: Aggregate ↔ model mapper
    """

    def __init__(
        self,
        session: AsyncSession,
        tracker: ChangeTracker,
        mapper: AggregateMapper[TAggregate, TModel],
        aggregate_type: type[TAggregate],
    ) -> None:
        self.session = session
        self.tracker = tracker
        self.mapper = mapper
        self.aggregate_type = aggregate_type

    async def get(self, aggregate_id: UUID) -> Optional[TAggregate]:
        """
        Load one aggregate by id (identity-mapped within the unit of work).

        Args:
            aggregate_id: UUID of the aggregate

        Returns:
            Aggregate if found, None otherwise
        """
        tracked = self.tracker.find(self.aggregate_type, aggregate_id)
        if tracked is not None:
            return tracked  # type: ignore[return-value]

        model = await self.session.get(
            self.mapper.model_type,
            aggregate_id,
            options=list(self.mapper.load_options()),
        )
        if model is None:
            logger.debug(
                "Aggregate not found",
                aggregate=self.aggregate_type.__name__,
                aggregate_id=str(aggregate_id),
            )
            return None
        return self._track(model)

    def add(self, aggregate: TAggregate) -> None:
        self.tracker.track_added(aggregate, self.mapper)

    def remove(self, aggregate: TAggregate) -> None:
        self.tracker.track_removed(aggregate, self.mapper)

    async def _list(self, stmt: Select[Any]) -> list[TAggregate]:
        """Execute a select over the root model and track every row."""
        result = await self.session.execute(stmt.options(*self.mapper.load_options()))
        return [self._track(model) for model in result.scalars().unique().all()]

    def _track(self, model: TModel) -> TAggregate:
        aggregate = self.mapper.to_domain(model)
        return self.tracker.track_loaded(aggregate, self.mapper)  # type: ignore[return-value]
