"""
Centralized API Error Handlers
Maps domain exceptions to the JSON problem body
"""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.error_codes import ERROR_CODES
from shared.exceptions import DomainError
from shared.infrastructure.observability.logger import get_logger
from shared.request_context import get_request_id

logger = get_logger(__name__)


def _problem(
    code: str,
    message: str,
    details: dict[str, Any] | list[Any] | None = None,
    correlation_id: str | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {"code": code, "message": message}
    if details:
        body["details"] = details
    if correlation_id:
        body["correlation_id"] = correlation_id
    return body


async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """
    Handle DomainError and subclasses.

    Args:
        request: FastAPI request
        exc: DomainError instance

    Returns:
        JSONResponse with the problem body
    """
    logger.warning(
        "Domain error",
        code=exc.code,
        message=exc.message,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_problem(exc.code, exc.message, exc.details, get_request_id()),
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI request body/query validation errors."""
    entry = ERROR_CODES["validation_error"]
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.info("Request validation failed", path=request.url.path, errors=len(errors))
    return JSONResponse(
        status_code=entry["http"],
        content=_problem("validation_error", entry["message"], {"errors": errors}, get_request_id()),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs full exception but returns a generic message to the client.
    """
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    entry = ERROR_CODES["internal_error"]
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_problem("internal_error", entry["message"], None, get_request_id()),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
