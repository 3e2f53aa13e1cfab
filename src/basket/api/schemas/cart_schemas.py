"""
Shopping Cart API Schemas
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateCartRequest(BaseModel):
    """Create cart request schema"""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    user_name: str = Field(..., min_length=1, max_length=100)
    session_id: Optional[str] = Field(None, max_length=100)


class AddCartItemRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    product_id: UUID
    product_name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    quantity: int = Field(default=1, gt=0)
    variant: Optional[str] = Field(None, max_length=50)


class UpdateCartItemQuantityRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    quantity: int
    variant: Optional[str] = Field(None, max_length=50)


class ApplyCartDiscountRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    code: str = Field(..., min_length=1, max_length=50)
    discount_type: Literal["Percentage", "Fixed"]
    value: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)


class CartItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    product_id: UUID
    product_name: str
    product_price: Decimal
    unit_price: Decimal
    quantity: int
    variant: Optional[str] = None
    total_price: Decimal


class CartDiscountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    discount_type: str
    value: Decimal


class CartResponse(BaseModel):
    """Shopping cart response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_name: str
    session_id: Optional[str] = None
    status: str
    items: list[CartItemResponse]
    discounts: list[CartDiscountResponse]
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal
    item_count: int
    created_at: Optional[datetime] = None
    last_modified_at: Optional[datetime] = None


class CartLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    cart_id: UUID
    user_name: str
    status: str
    quantity: int
    variant: Optional[str] = None
    unit_price: Decimal
