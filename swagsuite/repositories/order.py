"""Order and order item repositories."""


from decimal import Decimal

from sqlalchemy import func, select

from swagsuite.domain.order import Order, OrderItem
from swagsuite.repositories.base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    model = Order
    search_columns = ("order_number", "notes")

    async def recent(self, limit: int) -> list[Order]:
        q = self._base_query().order_by(Order.created_at.desc()).limit(limit)
        return list((await self._session.execute(q)).scalars().all())

    async def count_by_status(self) -> dict[str, int]:
        q = select(Order.status, func.count()).group_by(Order.status)
        return {status: count for status, count in (await self._session.execute(q)).all()}

    async def revenue(self, exclude_statuses: tuple[str, ...] = ()) -> Decimal:
        q = select(func.coalesce(func.sum(Order.total), 0))
        if exclude_statuses:
            q = q.where(Order.status.not_in(exclude_statuses))
        return Decimal(str((await self._session.execute(q)).scalar_one()))


class OrderItemRepository(BaseRepository[OrderItem]):
    model = OrderItem

    async def for_order(self, order_id: str) -> list[OrderItem]:
        return await self.list_all(
            filters={"order_id": order_id}, order_by=(OrderItem.created_at.asc(),)
        )
