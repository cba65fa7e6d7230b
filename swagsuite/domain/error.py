"""SQLAlchemy ORM model for tracked order errors (incidents)."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from swagsuite.db.base import Base
from swagsuite.domain.mixins import TimestampMixin, UUIDMixin


class ErrorRecord(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "errors"

    date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    project_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    order_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("orders.id", ondelete="SET NULL"), nullable=True
    )

    # "pricing" | "in_hands_date" | "shipping" | "printing" | "artwork_proofing" | "oos" | "other"
    error_type: Mapped[str] = mapped_column(String(30), default="other", nullable=False, index=True)
    client_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    vendor_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # "customer" | "vendor" | "lsd"
    responsible_party: Mapped[str] = mapped_column(
        String(20), default="lsd", nullable=False, index=True
    )
    # "refund" | "credit_for_future_order" | "reprint" | "courier_shipping" | "other"
    resolution: Mapped[str] = mapped_column(String(30), default="other", nullable=False)
    cost_to_lsd: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"), nullable=False)

    production_rep: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    order_rep: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    client_rep: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    additional_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_resolved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    resolved_at: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    resolved_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    created_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
