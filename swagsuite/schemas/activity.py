"""Activity log, project timeline and notification Pydantic schemas."""


from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from swagsuite.schemas.common import CamelModel

ProjectActivityType = Literal["status_change", "comment", "file_upload", "mention", "system_action"]

class ActivityOut(CamelModel):
    id: str
    user_id: str | None = None
    entity_type: str
    entity_id: str | None = None
    action: str
    description: str | None = None
    # ORM attribute is ``details``; the wire and column name is ``metadata``
    details: dict[str, Any] | None = Field(default=None, serialization_alias="metadata")
    created_at: datetime

class ProjectActivityCreate(CamelModel):
    activity_type: ProjectActivityType = "comment"
    content: str = Field(min_length=1)
    metadata: dict[str, Any] | None = None
    mentioned_users: list[str] = Field(default_factory=list)

class ProjectActivityOut(CamelModel):
    id: str
    order_id: str
    user_id: str
    activity_type: str
    content: str
    details: dict[str, Any] | None = Field(default=None, serialization_alias="metadata")
    mentioned_users: list[str] | None = None
    is_system_generated: bool
    created_at: datetime

class NotificationOut(CamelModel):
    id: str
    recipient_id: str
    sender_id: str | None = None
    order_id: str | None = None
    activity_id: str | None = None
    type: str
    title: str
    message: str
    is_read: bool
    created_at: datetime

class MarkAllReadResponse(CamelModel):
    updated: int
