"""
Shared API Layer
FastAPI routers, response models, error handlers, and middleware
"""
from shared.api.base_router import create_api_router
from shared.api.dependencies import MediatorDep, get_mediator
from shared.api.error_handlers import register_exception_handlers
from shared.api.middleware import CorrelationIdMiddleware
from shared.api.response_models import PaginatedResponse, ProblemDetail

__all__ = [
    "create_api_router",
    "MediatorDep",
    "get_mediator",
    "register_exception_handlers",
    "CorrelationIdMiddleware",
    "PaginatedResponse",
    "ProblemDetail",
]
