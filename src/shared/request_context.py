# src/shared/request_context.py
from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

# Context variables, set once per request by middleware

ACTOR_VAR = contextvars.ContextVar[Optional[str]]("actor", default=None)
REQUEST_ID_VAR = contextvars.ContextVar[Optional[str]]("request_id", default=None)


def set_all(*, actor: Optional[str], request_id: Optional[str]) -> None:
    ACTOR_VAR.set(actor)
    REQUEST_ID_VAR.set(request_id)


def clear_all() -> None:
    ACTOR_VAR.set(None)
    REQUEST_ID_VAR.set(None)


def get_actor() -> Optional[str]:
    return ACTOR_VAR.get()


def get_request_id() -> Optional[str]:
    return REQUEST_ID_VAR.get()


def snapshot() -> Dict[str, object]:
    """Return a simple snapshot of the current ctxvars."""
    return {"actor": get_actor(), "request_id": get_request_id()}


# -------------------------------------------------------------------
# Context manager for temporary binding
# -------------------------------------------------------------------
@contextmanager
def acting_as(actor: str) -> Iterator[None]:
    """Bind the audit actor for the duration of the block."""
    token = ACTOR_VAR.set(actor)
    try:
        yield
    finally:
        ACTOR_VAR.reset(token)
