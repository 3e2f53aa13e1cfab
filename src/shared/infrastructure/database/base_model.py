"""
SQLAlchemy Declarative Base
All ORM models inherit from this
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Numeric, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Per-module schemas; collapsed by ``schema_translate_map`` on single-schema databases
MODULE_SCHEMAS: tuple[str, ...] = ("catalog", "basket")


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Provides the UUID primary key. Ids are assigned by domain factories,
    never by the database.
    """

    type_annotation_map = {
        UUID: Uuid(as_uuid=True),
        datetime: DateTime(timezone=True),
        Decimal: Numeric(18, 2),
    }

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)

    def __repr__(self) -> str:
        """String representation showing table name and id."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class AuditMixin:
    """Audit columns stamped by the save interceptor."""

    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_modified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_modified_by: Mapped[str | None] = mapped_column(String(100), nullable=True)


class SoftDeleteMixin:
    """Soft-delete columns; rows are flagged, never physically removed."""

    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
