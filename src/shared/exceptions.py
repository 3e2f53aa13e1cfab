"""
Shared Exception Hierarchy
Domain and application errors carrying a stable code and HTTP status
"""
from __future__ import annotations

from typing import Any, Dict, Optional


# ───────────────────────── Base & Domain Exceptions ─────────────────────────
class DomainError(Exception):
    """Base class for domain-level errors. Services should raise these, never HTTPException."""
    code: str = "domain_error"
    status_code: int = 400
    message: str
    details: Optional[Dict[str, Any]]

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.message = message or self.__class__.__name__
        self.details = details


class ValidationError(DomainError):
    code = "validation_error"
    status_code = 422


class NotFoundError(DomainError):
    # generic; set a specific code via constructor if needed (e.g., "product_not_found")
    code = "not_found"
    status_code = 404


class InvalidOperationError(DomainError):
    code = "invalid_operation"
    status_code = 409


class InternalServerError(DomainError):
    code = "internal_error"
    status_code = 500


class UnitOfWorkError(InternalServerError):
    """Raised when a unit of work is used outside its lifecycle."""
    code = "unit_of_work_error"


__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "InvalidOperationError",
    "InternalServerError",
    "UnitOfWorkError",
]
