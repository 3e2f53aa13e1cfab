"""
Base Query Contract for CQRS
All queries (read operations) inherit from this
"""
from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class BaseQuery:
    """
    Base class for all queries in the system.

    Queries represent read operations and should not modify state.

    Example:
        @dataclass(frozen=True)
        class GetProductByIdQuery(BaseQuery):
            product_id: UUID
    """

    query_id: UUID | None = field(default=None, kw_only=True)
