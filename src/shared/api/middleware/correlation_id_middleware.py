"""
Correlation ID Middleware
Adds unique request ID and audit actor to the request context
"""
from __future__ import annotations

import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from shared import request_context
from shared.infrastructure.observability.logger import bind_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
ACTOR_HEADER = "X-Actor"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add correlation ID to all requests.

    Generates or extracts the X-Request-ID header and binds it to the logging
    context. The optional X-Actor header becomes the audit actor stamped on
    entities saved during the request.

    Also measures request duration and adds it to response headers.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Process request with correlation ID.

        Args:
            request: Incoming FastAPI request
            call_next: Next middleware/endpoint in chain

        Returns:
            Response with correlation ID header
        """
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        actor = request.headers.get(ACTOR_HEADER)

        request_context.set_all(actor=actor, request_id=correlation_id)
        bind_context(
            request_id=correlation_id,
            actor=actor,
            method=request.method,
            path=request.url.path,
        )

        start_time = time.perf_counter()
        logger.info(
            "Request started",
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)

            duration_ms = int((time.perf_counter() - start_time) * 1000)
            response.headers[REQUEST_ID_HEADER] = correlation_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            return response
        except Exception as e:
            duration_ms = int((time.perf_counter() - start_time) * 1000)
            logger.error(
                "Request failed",
                error=str(e),
                duration_ms=duration_ms,
                exc_info=True,
            )
            raise
        finally:
            request_context.clear_all()
            clear_context()
