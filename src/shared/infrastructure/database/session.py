"""
Database Session Factory
Creates async SQLAlchemy sessions with proper configuration
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from shared.infrastructure.database.base_model import MODULE_SCHEMAS, Base
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class DatabaseSessionFactory:
    """
    Factory for creating async database sessions.

    Manages the async engine and session maker. On sqlite (tests, local
    runs) the per-module schemas are translated away and a single shared
    connection is used so an in-memory database survives across sessions.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 20,
    ) -> None:
        """
        Initialize session factory with database connection.

        Args:
            database_url: Async SQLAlchemy URL (postgresql+asyncpg or sqlite+aiosqlite)
            echo: Whether to log SQL statements (debug mode)
            pool_size: Connection pool size (ignored for sqlite)
            max_overflow: Max overflow connections beyond pool_size (ignored for sqlite)
        """
        self.database_url = database_url
        self.is_sqlite = database_url.startswith("sqlite")

        engine_kwargs: dict[str, Any] = {"echo": echo}
        if self.is_sqlite:
            engine_kwargs.update(
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
                execution_options={
                    "schema_translate_map": {schema: None for schema in MODULE_SCHEMAS},
                },
            )
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        logger.info(
            "Database session factory initialized",
            dialect=self.engine.dialect.name,
            sqlite=self.is_sqlite,
        )

    def __call__(self) -> AsyncSession:
        return self.session_factory()

    async def create_all(self) -> None:
        """Create every mapped table (and the module schemas on PostgreSQL)."""
        async with self.engine.begin() as conn:
            if not self.is_sqlite:
                for schema in MODULE_SCHEMAS:
                    await conn.exec_driver_sql(f'CREATE SCHEMA IF NOT EXISTS "{schema}"')
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created", tables=len(Base.metadata.tables))

    async def dispose(self) -> None:
        """Close all connections and dispose of the engine."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
