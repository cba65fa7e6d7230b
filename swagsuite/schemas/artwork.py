"""Artwork file and kanban board Pydantic schemas."""


from datetime import date, datetime
from typing import Literal

from pydantic import Field

from swagsuite.schemas.common import CamelModel

CardPriority = Literal["low", "medium", "high", "urgent"]

class ArtworkFileOut(CamelModel):
    id: str
    order_id: str | None = None
    company_id: str | None = None
    file_name: str
    original_name: str
    file_size: int
    mime_type: str | None = None
    file_path: str
    uploaded_by: str | None = None
    created_at: datetime

class ArtworkColumnCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    color: str = Field(default="#6B7280", max_length=20)
    position: int | None = Field(default=None, ge=1)

class ArtworkColumnOut(CamelModel):
    id: str
    name: str
    position: int
    color: str
    is_default: bool

class ArtworkCardCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    column_id: str
    company_id: str | None = None
    order_id: str | None = None
    assigned_user_id: str | None = None
    priority: CardPriority = "medium"
    due_date: date | None = None

class ArtworkCardUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    company_id: str | None = None
    order_id: str | None = None
    assigned_user_id: str | None = None
    priority: CardPriority | None = None
    due_date: date | None = None

class ArtworkCardMove(CamelModel):
    """Drop target: destination column and 1-based position within it."""
    column_id: str
    position: int = Field(ge=1)

class ArtworkCardOut(CamelModel):
    id: str
    title: str
    description: str | None = None
    column_id: str
    position: int
    company_id: str | None = None
    order_id: str | None = None
    assigned_user_id: str | None = None
    priority: str
    due_date: date | None = None
    created_at: datetime
    updated_at: datetime
