"""
Product ORM Model
"""
from __future__ import annotations

from decimal import Decimal

from sqlalchemy import JSON, Boolean, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database.base_model import AuditMixin, Base, SoftDeleteMixin


class ProductModel(Base, AuditMixin, SoftDeleteMixin):
    """
    ORM model for catalog.products.

    ``is_available`` is stored for filtering only; the aggregate derives it.
    """

    __tablename__ = "products"
    __table_args__ = {"schema": "catalog"}

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    image_file: Mapped[str] = mapped_column(String(500), nullable=False)
    categories: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
