"""
Base FastAPI Router
Common router setup and utilities
"""
from __future__ import annotations

from typing import Any, Sequence

from fastapi import APIRouter

from shared.api.response_models import ProblemDetail
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

_PROBLEM_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ProblemDetail, "description": "Resource not found"},
    409: {"model": ProblemDetail, "description": "Operation not allowed in current state"},
    422: {"model": ProblemDetail, "description": "Validation failed"},
}


def create_api_router(prefix: str, tags: Sequence[str]) -> APIRouter:
    """
    Create a module router with the shared problem responses documented.

    Args:
        prefix: Route prefix (e.g., "/catalog")
        tags: OpenAPI tags for grouping

    Returns:
        Configured APIRouter instance
    """
    router = APIRouter(prefix=prefix, tags=list(tags), responses=_PROBLEM_RESPONSES)
    logger.debug("Created API router", prefix=prefix, tags=list(tags))
    return router
