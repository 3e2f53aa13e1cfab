"""
SQLAlchemy Implementation of Unit of Work
Tracks aggregates, persists them through mappers and runs the save interceptor
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shared.config import DispatchMode
from shared.domain.domain_event import utc_now
from shared.exceptions import UnitOfWorkError
from shared.infrastructure.database.change_tracker import ChangeTracker, EntryState, TrackedEntry
from shared.infrastructure.database.save_changes_interceptor import SaveChangesInterceptor
from shared.infrastructure.messaging.domain_event_dispatcher import DomainEventDispatcher
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class CycleState(str, Enum):
    IDLE = "idle"
    COLLECTING = "collecting"
    COMMITTING = "committing"
    DISPATCHING = "dispatching"
    DISCARDING = "discarding"


class SQLAlchemyUnitOfWork:
    """
    SQLAlchemy-based Unit of Work implementation.

    One instance serves one request. Inside ``async with uow:`` repositories
    load aggregates into the change tracker; ``commit()`` runs one save cycle:

        Idle → Collecting → Committing → Dispatching | Discarding → Idle

    A second ``commit()`` while a cycle is running raises UnitOfWorkError.

    Attributes:
        session: Async SQLAlchemy session (None outside the context)
        tracker: Change tracker for the current context
        _state: Current save-cycle state
        _committed: Flag tracking if the last cycle committed
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        dispatcher: DomainEventDispatcher,
        *,
        dispatch_mode: DispatchMode = DispatchMode.WAIT,
        default_actor: str = "system",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize UoW.

        Args:
            session_factory: Callable returning a new AsyncSession
            dispatcher: In-process domain event dispatcher
            dispatch_mode: WAIT or DETACHED post-commit dispatch
            default_actor: Audit actor used when no request actor is bound
            clock: Source of audit timestamps
        """
        self._session_factory = session_factory
        self._dispatcher = dispatcher
        self._dispatch_mode = dispatch_mode
        self._default_actor = default_actor
        self._clock = clock

        self.session: Optional[AsyncSession] = None
        self.tracker = ChangeTracker()
        self._interceptor: Optional[SaveChangesInterceptor] = None
        self._state = CycleState.IDLE
        self._committed = False

    @property
    def state(self) -> CycleState:
        return self._state

    def now(self) -> datetime:
        """Current time from the unit of work clock (used for set-based writes)."""
        return self._clock()

    @property
    def interceptor(self) -> SaveChangesInterceptor:
        if self._interceptor is None:
            raise UnitOfWorkError("Unit of work is not active")
        return self._interceptor

    def _require_session(self) -> AsyncSession:
        if self.session is None:
            raise UnitOfWorkError("Unit of work used outside of 'async with'")
        return self.session

    def _reset_repositories(self) -> None:
        """Drop repositories bound to the previous session (module UoWs override)."""

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        """
        Enter async context manager.

        Opens a session and a fresh change tracker and interceptor.
        """
        if self.session is not None:
            raise UnitOfWorkError("Unit of work is already active")

        self.session = self._session_factory()
        self.tracker = ChangeTracker()
        self._interceptor = SaveChangesInterceptor(
            self._dispatcher,
            dispatch_mode=self._dispatch_mode,
            default_actor=self._default_actor,
            clock=self._clock,
        )
        self._state = CycleState.IDLE
        self._committed = False
        self._reset_repositories()

        logger.debug("UnitOfWork started")
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """
        Exit async context manager.

        Rolls back anything not committed and closes the session.
        """
        session = self.session
        try:
            if session is not None and session.in_transaction():
                await session.rollback()
                if exc_type is not None:
                    logger.debug("UnitOfWork rolled back due to exception", exception=str(exc_val))
        finally:
            if session is not None:
                await session.close()
            self.session = None
            self._interceptor = None
            self.tracker.clear()
            self._reset_repositories()

    async def commit(self) -> None:
        """
        Run one save cycle.

        Raises:
            UnitOfWorkError: Outside the context or while another cycle runs
            Exception: Whatever the storage commit raised, unchanged
        """
        session = self._require_session()
        if self._state is not CycleState.IDLE:
            raise UnitOfWorkError(
                "Concurrent commit on the same unit of work",
                details={"state": self._state.value},
            )

        interceptor = self.interceptor
        self._state = CycleState.COLLECTING
        try:
            self.tracker.detect_changes()
            entries = self.tracker.entries()
            interceptor.saving_changes(entries)

            self._state = CycleState.COMMITTING
            await self._persist(session, entries)
            await session.commit()
        except BaseException as e:
            self._state = CycleState.DISCARDING
            try:
                await session.rollback()
            except Exception as rollback_error:
                logger.error("UnitOfWork rollback failed", error=str(rollback_error))
            interceptor.save_changes_failed(e)
            self._state = CycleState.IDLE
            logger.error("UnitOfWork commit failed", error=str(e), error_type=type(e).__name__)
            raise

        self.tracker.accept_all_changes()
        self._committed = True
        logger.debug("UnitOfWork transaction committed", entries=len(entries))

        self._state = CycleState.DISPATCHING
        try:
            await interceptor.saved_changes()
        finally:
            self._state = CycleState.IDLE

    async def rollback(self) -> None:
        """Discard pending storage changes and collected events."""
        session = self._require_session()
        await session.rollback()
        self.interceptor.save_changes_failed(UnitOfWorkError("rolled back"))
        self._committed = False
        logger.debug("UnitOfWork transaction rolled back")

    async def _persist(self, session: AsyncSession, entries: list[TrackedEntry]) -> None:
        for entry in entries:
            mapper = entry.mapper
            if entry.state is EntryState.ADDED:
                session.add(mapper.to_model(entry.aggregate))
            elif entry.state is EntryState.MODIFIED:
                model = await session.get(
                    mapper.model_type,
                    entry.aggregate.id,
                    options=list(mapper.load_options()),
                )
                if model is None:
                    raise UnitOfWorkError(
                        f"{type(entry.aggregate).__name__} {entry.aggregate.id} no longer exists",
                    )
                mapper.apply(entry.aggregate, model)
            elif entry.state is EntryState.DELETED:
                model = await session.get(
                    mapper.model_type,
                    entry.aggregate.id,
                    options=list(mapper.load_options()),
                )
                if model is not None:
                    await session.delete(model)
        await session.flush()
