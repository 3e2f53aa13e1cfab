"""
Base Entity Contract for Domain Layer
Provides UUID-based identity, equality, and audit fields
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID, uuid4


class BaseEntity(ABC):
    """
    Abstract base class for all domain entities.

    Entities are defined by their identity (id), not their attributes.
    Two entities are equal if they have the same id, regardless of other attributes.

    Audit fields are owned by the persistence layer: the save interceptor
    stamps them when the entity is added or modified. Domain code reads them
    but never sets them.

    Attributes:
        id: Unique identifier (UUID)
        created_at: Timestamp of creation (None until first save)
        created_by: Actor that created the entity
        last_modified_at: Timestamp of last modification
        last_modified_by: Actor of last modification
    """

    def __init__(
        self,
        id: UUID | None = None,
        created_at: datetime | None = None,
        created_by: str | None = None,
        last_modified_at: datetime | None = None,
        last_modified_by: str | None = None,
    ) -> None:
        """
        Initialize entity with identity and audit fields.

        Args:
            id: Entity UUID (generated if None)
            created_at: Creation timestamp
            created_by: Creating actor
            last_modified_at: Last modification timestamp
            last_modified_by: Last modifying actor
        """
        self._id: UUID = id or uuid4()
        self.created_at: datetime | None = created_at
        self.created_by: str | None = created_by
        self.last_modified_at: datetime | None = last_modified_at
        self.last_modified_by: str | None = last_modified_by

    @property
    def id(self) -> UUID:
        return self._id

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same id and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on id for use in sets/dicts."""
        return hash(self.id)

    def __repr__(self) -> str:
        """String representation showing class name and id."""
        return f"{self.__class__.__name__}(id={self.id})"

    def stamp_created(self, at: datetime, by: str) -> None:
        """Record creation audit fields (persistence layer only)."""
        self.created_at = at
        self.created_by = by

    def stamp_modified(self, at: datetime, by: str) -> None:
        """Record modification audit fields (persistence layer only)."""
        self.last_modified_at = at
        self.last_modified_by = by


class SoftDeletable(ABC):
    """
    Mixin for entities that are never physically removed.

    Physical removal requested through a unit of work is converted into
    ``soft_delete()`` by the save interceptor; the interceptor then stamps
    ``deleted_at`` and ``deleted_by``.
    """

    is_deleted: bool
    deleted_at: datetime | None
    deleted_by: str | None

    @abstractmethod
    def soft_delete(self) -> None:
        """Flag the entity as deleted."""

    def stamp_deleted(self, at: datetime, by: str) -> None:
        self.deleted_at = at
        self.deleted_by = by
