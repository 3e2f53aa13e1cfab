"""
Shared API Dependencies
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from shared.application.mediator import Mediator


def get_mediator(request: Request) -> Mediator:
    """Mediator built by the bootstrapper and stored on the application state."""
    return request.app.state.mediator


MediatorDep = Annotated[Mediator, Depends(get_mediator)]
