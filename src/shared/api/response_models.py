"""
Standard API Response Models
Problem body and paging envelope shared by every module
"""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ProblemDetail(BaseModel):
    """
    Error body returned for every 4xx/5xx response.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        details: Additional error context (optional)
        correlation_id: Request id echoed from X-Request-ID (optional)
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error context")
    correlation_id: str | None = Field(None, description="Request correlation id")


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Paginated response wrapper.

    Attributes:
        data: List of items
        total: Total number of items (across all pages)
        page: Current page number (1-indexed)
        page_size: Items per page
        total_pages: Total number of pages
    """

    model_config = ConfigDict(frozen=True)

    data: list[T] = Field(..., description="List of items")
    total: int = Field(..., description="Total number of items")
    page: int = Field(..., description="Current page number (1-indexed)")
    page_size: int = Field(..., description="Items per page")
    total_pages: int = Field(..., description="Total number of pages")

    @classmethod
    def build(cls, data: list[T], total: int, page: int, page_size: int) -> "PaginatedResponse[T]":
        total_pages = (total + page_size - 1) // page_size if page_size else 0
        return cls(data=data, total=total, page=page, page_size=page_size, total_pages=total_pages)
