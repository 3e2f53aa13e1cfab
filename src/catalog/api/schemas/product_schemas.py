"""
Product API Schemas
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateProductRequest(BaseModel):
    """Create product request schema"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    price: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    image_file: str = Field(..., min_length=1, max_length=500)
    categories: list[str] = Field(default_factory=list)
    stock_quantity: int = Field(default=0, ge=0)


class UpdateProductRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=1000)
    image_file: Optional[str] = Field(None, min_length=1, max_length=500)


class UpdatePriceRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    price: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    reason: str = Field(default="Price update", max_length=200)


class UpdateStockRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    stock_quantity: int = Field(..., ge=0)


class ApplyDiscountRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    percentage: Decimal = Field(..., ge=0, le=100)
    reason: str = Field(default="Discount applied", max_length=200)


class CategoriesRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    categories: list[str] = Field(..., min_length=1)


class ProductResponse(BaseModel):
    """Product response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    price: Decimal
    image_file: str
    categories: list[str]
    stock_quantity: int
    is_available: bool
    created_at: Optional[datetime] = None
    last_modified_at: Optional[datetime] = None
