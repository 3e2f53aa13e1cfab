"""
Basket ORM Models
Carts, their line items and applied discounts in the basket schema
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.domain.domain_event import utc_now
from shared.infrastructure.database.base_model import AuditMixin, Base


class ShoppingCartModel(Base, AuditMixin):
    """ORM model for basket.shopping_carts."""

    __tablename__ = "shopping_carts"
    __table_args__ = {"schema": "basket"}

    user_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    session_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Active", index=True)

    items: Mapped[List[ShoppingCartItemModel]] = relationship(
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="ShoppingCartItemModel.added_at",
        lazy="selectin",
    )
    discounts: Mapped[List[CartDiscountModel]] = relationship(
        back_populates="cart",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class ShoppingCartItemModel(Base):
    """
    ORM model for basket.shopping_cart_items.

    ``product_id`` references a catalog product by value only; there is no
    foreign key across module schemas.
    """

    __tablename__ = "shopping_cart_items"
    __table_args__ = {"schema": "basket"}

    cart_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("basket.shopping_carts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    product_name: Mapped[str] = mapped_column(String(200), nullable=False)
    product_price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    variant: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    added_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    last_modified_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    cart: Mapped[ShoppingCartModel] = relationship(back_populates="items")


class CartDiscountModel(Base):
    """ORM model for basket.cart_discounts."""

    __tablename__ = "cart_discounts"
    __table_args__ = {"schema": "basket"}

    cart_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("basket.shopping_carts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    discount_type: Mapped[str] = mapped_column(String(20), nullable=False)
    value: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    applied_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)

    cart: Mapped[ShoppingCartModel] = relationship(back_populates="discounts")
