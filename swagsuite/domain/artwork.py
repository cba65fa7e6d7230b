"""SQLAlchemy ORM models for artwork files and the artwork kanban board."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from swagsuite.db.base import Base
from swagsuite.domain.mixins import TimestampMixin, UUIDMixin


class ArtworkFile(Base, UUIDMixin, TimestampMixin):
    """One uploaded artwork file (stored on local disk under settings.upload_dir)."""

    __tablename__ = "artwork_files"

    order_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("orders.id", ondelete="SET NULL"), index=True, nullable=True
    )
    company_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("companies.id", ondelete="SET NULL"), index=True, nullable=True
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)
    mime_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    file_path: Mapped[str] = mapped_column(String(500), nullable=False)
    uploaded_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)


class ArtworkColumn(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "artwork_columns"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    color: Mapped[str] = mapped_column(String(20), default="#6B7280", nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    cards: Mapped[List["ArtworkCard"]] = relationship(
        back_populates="column", lazy="noload", cascade="all, delete-orphan"
    )


class ArtworkCard(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "artwork_cards"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    column_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("artwork_columns.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # 1-based, contiguous within a column
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    company_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("companies.id", ondelete="SET NULL"), nullable=True
    )
    order_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("orders.id", ondelete="SET NULL"), nullable=True
    )
    assigned_user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    # "low" | "medium" | "high" | "urgent"
    priority: Mapped[str] = mapped_column(String(20), default="medium", nullable=False)
    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    column: Mapped["ArtworkColumn"] = relationship(back_populates="cards", lazy="noload")
