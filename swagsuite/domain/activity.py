"""SQLAlchemy ORM models for the activity log, order timelines and notifications."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, JSON, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from swagsuite.db.base import Base
from swagsuite.domain.mixins import UUIDMixin


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Activity(Base, UUIDMixin):
    """Entity-level change log (company created, order updated, ...)."""

    __tablename__ = "activities"

    user_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    entity_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    entity_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    details: Mapped[Optional[Any]] = mapped_column("metadata", JSON, nullable=True)

    # Immutable rows: no updated_at
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now,
        server_default=func.now(),
        nullable=False,
        index=True,
    )


class ProjectActivity(Base, UUIDMixin):
    """One entry on an order's project timeline."""

    __tablename__ = "project_activities"

    order_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    # "status_change" | "comment" | "file_upload" | "mention" | "system_action"
    activity_type: Mapped[str] = mapped_column(String(30), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    details: Mapped[Optional[Any]] = mapped_column("metadata", JSON, nullable=True)
    mentioned_users: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    is_system_generated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, server_default=func.now(), nullable=False
    )


class Notification(Base, UUIDMixin):
    __tablename__ = "notifications"

    recipient_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    sender_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    order_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=True
    )
    activity_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("project_activities.id", ondelete="CASCADE"), nullable=True
    )
    # "mention" | "project_update" | "status_change"
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, server_default=func.now(), nullable=False
    )
