"""
Unit of Work Interface (Protocol)
Transaction boundary consumed by command handlers
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar, runtime_checkable
from uuid import UUID

from shared.domain.base_aggregate_root import BaseAggregateRoot

TAggregate = TypeVar("TAggregate", bound=BaseAggregateRoot)


@runtime_checkable
class IRepository(Protocol[TAggregate]):
    """Aggregate collection exposed by a unit of work."""

    async def get(self, aggregate_id: UUID) -> Optional[TAggregate]: ...

    def add(self, aggregate: TAggregate) -> None: ...

    def remove(self, aggregate: TAggregate) -> None: ...


@runtime_checkable
class IUnitOfWork(Protocol):
    """
    Unit of Work interface for transaction management.

    Usage:
        async with uow:
            product = await uow.products.get(product_id)
            product.update_price(Decimal("80.00"), "sale")
            await uow.commit()  # persists, then dispatches collected events
    """

    async def __aenter__(self) -> Any: ...

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...

    async def commit(self) -> None:
        """
        Persist tracked changes and dispatch the collected domain events.

        Raises:
            Exception: If the storage commit fails (events are discarded)
        """
        ...

    async def rollback(self) -> None: ...
