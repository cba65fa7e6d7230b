"""Activity log, per-order project timeline and notification routers."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.deps import get_current_user_id
from swagsuite.core.response import DataResponse, ItemsResponse
from swagsuite.db.base import get_db
from swagsuite.schemas.activity import (
    ActivityOut,
    MarkAllReadResponse,
    NotificationOut,
    ProjectActivityCreate,
    ProjectActivityOut,
)
from swagsuite.services.activity import (
    ActivityService,
    NotificationService,
    ProjectTimelineService,
)

router = APIRouter(prefix="/api/activities", tags=["Activities"])
projects_router = APIRouter(prefix="/api/projects", tags=["Project timeline"])
notifications_router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("", response_model=ItemsResponse[ActivityOut])
async def list_activities(
    entity_type: Optional[str] = Query(default=None, alias="entityType"),
    entity_id: Optional[str] = Query(default=None, alias="entityId"),
    session: AsyncSession = Depends(get_db),
):
    """Newest first."""
    activities = await ActivityService(session).list_activities(entity_type, entity_id)
    return {"data": [ActivityOut.model_validate(a) for a in activities]}


# ------------------------------------------------------------------
# Project timeline
# ------------------------------------------------------------------

@projects_router.get("/{order_id}/activities", response_model=ItemsResponse[ProjectActivityOut])
async def list_project_activities(
    order_id: str,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    entries = await ProjectTimelineService(session, user_id).list_for_order(order_id)
    return {"data": [ProjectActivityOut.model_validate(e) for e in entries]}


@projects_router.post(
    "/{order_id}/activities",
    response_model=DataResponse[ProjectActivityOut],
    status_code=status.HTTP_201_CREATED,
)
async def add_project_activity(
    order_id: str,
    body: ProjectActivityCreate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Post to the order timeline; each mentioned user gets a notification."""
    entry = await ProjectTimelineService(session, user_id).add(order_id, body)
    return {"data": ProjectActivityOut.model_validate(entry)}


# ------------------------------------------------------------------
# Notifications
# ------------------------------------------------------------------

@notifications_router.get("", response_model=ItemsResponse[NotificationOut])
async def list_notifications(
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    notifications = await NotificationService(session, user_id).list_notifications(unread_only)
    return {"data": [NotificationOut.model_validate(n) for n in notifications]}


# Registered before /{notification_id}/read so "read-all" is not taken as an id
@notifications_router.patch("/read-all", response_model=DataResponse[MarkAllReadResponse])
async def mark_all_notifications_read(
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    updated = await NotificationService(session, user_id).mark_all_read()
    return {"data": MarkAllReadResponse(updated=updated)}


@notifications_router.patch("/{notification_id}/read", response_model=DataResponse[NotificationOut])
async def mark_notification_read(
    notification_id: str,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    notification = await NotificationService(session, user_id).mark_read(notification_id)
    return {"data": NotificationOut.model_validate(notification)}
