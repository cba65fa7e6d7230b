"""Activity log, order project timeline and notification services."""


import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import NotFoundError
from swagsuite.domain.activity import Activity, Notification, ProjectActivity
from swagsuite.repositories.activity import (
    ActivityRepository,
    NotificationRepository,
    ProjectActivityRepository,
)
from swagsuite.repositories.order import OrderRepository
from swagsuite.schemas.activity import ProjectActivityCreate

logger = logging.getLogger(__name__)


class ActivityService:
    def __init__(self, session: AsyncSession, user_id: str | None = None):
        self._repo = ActivityRepository(session)
        self._user_id = user_id

    async def log(
        self,
        entity_type: str,
        entity_id: str | None,
        action: str,
        description: str,
        details: dict[str, Any] | None = None,
    ) -> Activity:
        logger.debug("activity %s/%s %s", entity_type, action, entity_id)
        return await self._repo.create(
            user_id=self._user_id,
            entity_type=entity_type,
            entity_id=entity_id,
            action=action,
            description=description,
            details=details,
        )

    async def list_activities(
        self, entity_type: str | None = None, entity_id: str | None = None
    ) -> list[Activity]:
        return await self._repo.recent(entity_type, entity_id)


class ProjectTimelineService:
    """Per-order timeline; @mentions fan out into notifications."""

    def __init__(self, session: AsyncSession, user_id: str):
        self._repo = ProjectActivityRepository(session)
        self._notifications = NotificationRepository(session)
        self._orders = OrderRepository(session)
        self._user_id = user_id

    async def _require_order(self, order_id: str):
        order = await self._orders.get_by_id(order_id)
        if not order:
            raise NotFoundError("Order", order_id)
        return order

    async def list_for_order(self, order_id: str) -> list[ProjectActivity]:
        await self._require_order(order_id)
        return await self._repo.for_order(order_id)

    async def add(self, order_id: str, data: ProjectActivityCreate) -> ProjectActivity:
        order = await self._require_order(order_id)
        mentioned = list(dict.fromkeys(u for u in data.mentioned_users if u))
        activity = await self._repo.create(
            order_id=order_id,
            user_id=self._user_id,
            activity_type=data.activity_type,
            content=data.content,
            details=data.metadata,
            mentioned_users=mentioned or None,
            is_system_generated=False,
        )
        for recipient in mentioned:
            if recipient == self._user_id:
                continue
            await self._notifications.create(
                recipient_id=recipient,
                sender_id=self._user_id,
                order_id=order_id,
                activity_id=activity.id,
                type="mention",
                title=f"You were mentioned on order {order.order_number}",
                message=data.content[:500],
            )
        return activity

    async def record_status_change(self, order_id: str, old: str, new: str) -> ProjectActivity:
        return await self._repo.create(
            order_id=order_id,
            user_id=self._user_id,
            activity_type="status_change",
            content=f"Status changed from {old} to {new}",
            details={"oldStatus": old, "newStatus": new},
            is_system_generated=True,
        )


class NotificationService:
    def __init__(self, session: AsyncSession, user_id: str):
        self._repo = NotificationRepository(session)
        self._user_id = user_id

    async def list_notifications(self, unread_only: bool = False) -> list[Notification]:
        return await self._repo.for_recipient(self._user_id, unread_only=unread_only)

    async def mark_read(self, notification_id: str) -> Notification:
        notification = await self._repo.get_by_id(notification_id)
        if not notification or notification.recipient_id != self._user_id:
            raise NotFoundError("Notification", notification_id)
        return await self._repo.update(notification_id, is_read=True)  # type: ignore[return-value]

    async def mark_all_read(self) -> int:
        return await self._repo.mark_all_read(self._user_id)
