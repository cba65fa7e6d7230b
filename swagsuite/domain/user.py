"""SQLAlchemy ORM model for application users.

Sign-in is handled upstream; this table only stores the profile the
dashboard and timeline display.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from swagsuite.db.base import Base
from swagsuite.domain.mixins import TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "users"

    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    profile_image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    # "admin" | "manager" | "user"
    role: Mapped[str] = mapped_column(String(20), default="user", nullable=False)
