"""SQLAlchemy ORM models for suppliers (vendors) and their catalog products."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import ForeignKey, Integer, JSON, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from swagsuite.db.base import Base
from swagsuite.domain.mixins import SoftDeleteMixin, TimestampMixin, UUIDMixin


class Supplier(Base, UUIDMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "suppliers"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    contact_person: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), default="US", nullable=True)
    payment_terms: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # "none" | "connected" | "error"
    api_integration_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    products: Mapped[List["Product"]] = relationship(back_populates="supplier", lazy="noload")


class Product(Base, UUIDMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "products"

    supplier_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("suppliers.id", ondelete="SET NULL"), index=True, nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    sku: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    base_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    minimum_quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    colors: Mapped[Optional[List[Any]]] = mapped_column(JSON, nullable=True)
    sizes: Mapped[Optional[List[Any]]] = mapped_column(JSON, nullable=True)
    imprint_methods: Mapped[Optional[List[Any]]] = mapped_column(JSON, nullable=True)
    lead_time: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # days
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    supplier: Mapped[Optional["Supplier"]] = relationship(back_populates="products", lazy="noload")
