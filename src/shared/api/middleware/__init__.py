"""
Shared API Middleware
Correlation ID and audit actor binding
"""
from shared.api.middleware.correlation_id_middleware import CorrelationIdMiddleware

__all__ = [
    "CorrelationIdMiddleware",
]
