"""Activity log, project timeline and notification repositories."""


from sqlalchemy import update

from swagsuite.domain.activity import Activity, Notification, ProjectActivity
from swagsuite.repositories.base import BaseRepository


class ActivityRepository(BaseRepository[Activity]):
    model = Activity

    async def recent(
        self, entity_type: str | None = None, entity_id: str | None = None, limit: int = 100
    ) -> list[Activity]:
        q = self._apply_filters(
            self._base_query(), {"entity_type": entity_type, "entity_id": entity_id}
        )
        q = q.order_by(Activity.created_at.desc()).limit(limit)
        return list((await self._session.execute(q)).scalars().all())


class ProjectActivityRepository(BaseRepository[ProjectActivity]):
    model = ProjectActivity

    async def for_order(self, order_id: str) -> list[ProjectActivity]:
        return await self.list_all(
            filters={"order_id": order_id}, order_by=(ProjectActivity.created_at.desc(),)
        )


class NotificationRepository(BaseRepository[Notification]):
    model = Notification

    async def for_recipient(self, recipient_id: str, unread_only: bool = False) -> list[Notification]:
        filters = {"recipient_id": recipient_id, "is_read": False if unread_only else None}
        return await self.list_all(filters=filters, order_by=(Notification.created_at.desc(),))

    async def mark_all_read(self, recipient_id: str) -> int:
        result = await self._session.execute(
            update(Notification)
            .where(Notification.recipient_id == recipient_id)
            .where(Notification.is_read.is_(False))
            .values(is_read=True)
        )
        await self._session.flush()
        return result.rowcount
