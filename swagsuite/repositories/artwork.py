"""Artwork file and kanban board repositories."""


from sqlalchemy import func, select

from swagsuite.domain.artwork import ArtworkCard, ArtworkColumn, ArtworkFile
from swagsuite.repositories.base import BaseRepository


class ArtworkFileRepository(BaseRepository[ArtworkFile]):
    model = ArtworkFile


class ArtworkColumnRepository(BaseRepository[ArtworkColumn]):
    model = ArtworkColumn

    async def ordered(self) -> list[ArtworkColumn]:
        return await self.list_all(order_by=(ArtworkColumn.position.asc(),))

    async def max_position(self) -> int:
        q = select(func.coalesce(func.max(ArtworkColumn.position), 0))
        return (await self._session.execute(q)).scalar_one()


class ArtworkCardRepository(BaseRepository[ArtworkCard]):
    model = ArtworkCard
    search_columns = ("title", "description")

    async def in_column(self, column_id: str) -> list[ArtworkCard]:
        return await self.list_all(
            filters={"column_id": column_id},
            order_by=(ArtworkCard.position.asc(), ArtworkCard.created_at.asc()),
        )

    async def ordered(self, column_id: str | None = None) -> list[ArtworkCard]:
        """Cards in board order: by column position, then card position."""
        q = self._apply_filters(self._base_query(), {"column_id": column_id})
        q = q.join(ArtworkColumn, ArtworkColumn.id == ArtworkCard.column_id).order_by(
            ArtworkColumn.position.asc(), ArtworkCard.position.asc()
        )
        return list((await self._session.execute(q)).scalars().all())

    async def max_position(self, column_id: str) -> int:
        q = select(func.coalesce(func.max(ArtworkCard.position), 0)).where(
            ArtworkCard.column_id == column_id
        )
        return (await self._session.execute(q)).scalar_one()
