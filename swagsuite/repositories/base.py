"""Generic async repository with soft-delete, pagination, and simple text search."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import BadRequestError
from swagsuite.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Soft-deletes: for models carrying ``deleted_at``, rows where it is set are
    excluded from all standard reads and ``delete`` only stamps the column.
    Models without the column are deleted outright.
    """

    model: type[ModelT]
    # Columns matched (case-insensitive substring) by ``search``
    search_columns: Sequence[str] = ()

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @property
    def _soft_deletes(self) -> bool:
        return hasattr(self.model, "deleted_at")

    def _base_query(self):
        """Return a SELECT excluding soft-deleted rows."""
        q = select(self.model)
        if self._soft_deletes:
            q = q.where(self.model.deleted_at.is_(None))
        return q

    def _sort_column(self, name: str):
        """Mapped column for a client-supplied sort key; 400 for anything else."""
        columns = self.model.__mapper__.columns
        if name in columns:
            return getattr(self.model, name)
        if name == "created_at":
            return None
        raise BadRequestError(f"Cannot sort by '{name}'")

    def _apply_filters(self, q, filters: dict[str, Any] | None):
        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)
        return q

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 50,
        order_by: str = "created_at",
        order: str = "desc",
        filters: dict[str, Any] | None = None,
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) with pagination and optional equality filters."""
        q = self._apply_filters(self._base_query(), filters)

        count_q = select(func.count()).select_from(q.subquery())
        total = (await self._session.execute(count_q)).scalar_one()

        col = self._sort_column(order_by)
        if col is not None:
            q = q.order_by(col.desc() if order == "desc" else col.asc())
        q = q.offset(offset).limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    async def list_all(
        self, *, filters: dict[str, Any] | None = None, order_by: Sequence[Any] = ()
    ) -> list[ModelT]:
        """Unpaginated read for small, explicitly ordered collections."""
        q = self._apply_filters(self._base_query(), filters)
        if order_by:
            q = q.order_by(*order_by)
        return list((await self._session.execute(q)).scalars().all())

    async def search(self, term: str, *, limit: int = 50) -> list[ModelT]:
        """Case-insensitive substring match over ``search_columns``."""
        pattern = f"%{term.lower()}%"
        clauses = [
            func.lower(getattr(self.model, name)).like(pattern)
            for name in self.search_columns
        ]
        q = self._base_query().where(or_(*clauses)).limit(limit)
        if hasattr(self.model, "created_at"):
            q = q.order_by(self.model.created_at.desc())
        return list((await self._session.execute(q)).scalars().all())

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        q = self._apply_filters(self._base_query(), filters)
        return (
            await self._session.execute(select(func.count()).select_from(q.subquery()))
        ).scalar_one()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id + server defaults
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        kwargs.pop("id", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)

        await self._session.execute(
            update(self.model).where(self.model.id == entity_id).values(**kwargs)
        )
        await self._session.flush()
        instance = await self.get_by_id(entity_id)
        if instance is not None:
            await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: str) -> bool:
        if self._soft_deletes:
            stmt = (
                update(self.model)
                .where(self.model.id == entity_id)
                .where(self.model.deleted_at.is_(None))
                .values(deleted_at=datetime.now(timezone.utc))
            )
        else:
            stmt = delete(self.model).where(self.model.id == entity_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0
