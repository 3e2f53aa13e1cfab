"""
Shared Database Infrastructure
Session management, change tracking, save interceptor and unit of work
"""
from shared.infrastructure.database.base_mapper import AggregateMapper
from shared.infrastructure.database.base_model import AuditMixin, Base, SoftDeleteMixin
from shared.infrastructure.database.change_tracker import ChangeTracker, EntryState, TrackedEntry
from shared.infrastructure.database.save_changes_interceptor import SaveChangesInterceptor
from shared.infrastructure.database.session import DatabaseSessionFactory
from shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyAggregateRepository
from shared.infrastructure.database.sqlalchemy_unit_of_work import CycleState, SQLAlchemyUnitOfWork
from shared.infrastructure.database.unit_of_work import IRepository, IUnitOfWork

__all__ = [
    "AggregateMapper",
    "AuditMixin",
    "Base",
    "SoftDeleteMixin",
    "ChangeTracker",
    "EntryState",
    "TrackedEntry",
    "SaveChangesInterceptor",
    "DatabaseSessionFactory",
    "SQLAlchemyAggregateRepository",
    "CycleState",
    "SQLAlchemyUnitOfWork",
    "IRepository",
    "IUnitOfWork",
]
