"""SQLAlchemy ORM models for the S&S Activewear catalog mirror and its import jobs."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from swagsuite.db.base import Base
from swagsuite.domain.mixins import TimestampMixin, UUIDMixin


class SsActivewearProduct(Base, UUIDMixin, TimestampMixin):
    """One S&S SKU (a style in a single color and size)."""

    __tablename__ = "ss_activewear_products"

    sku: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    gtin: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    style_id: Mapped[Optional[int]] = mapped_column(Integer, index=True, nullable=True)
    brand_name: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    style_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    color_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    color_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    size_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    size_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    unit_weight: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    case_qty: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    piece_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    dozen_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    case_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    customer_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    qty: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    color_front_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    color_back_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    color_side_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    color_swatch_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    country_of_origin: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_synced_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class SsActivewearImportJob(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "ss_activewear_import_jobs"

    user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    # "pending" | "running" | "completed" | "failed"
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False, index=True)
    style_filter: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    total_products: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    processed_products: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    new_products: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    updated_products: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    error_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    error_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    started_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
