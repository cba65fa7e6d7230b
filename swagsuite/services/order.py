"""Order (quote -> delivery) and order line item services."""


import logging
import time

from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import ConflictError, NotFoundError
from swagsuite.core.pagination import PaginationParams
from swagsuite.domain.order import Order, OrderItem
from swagsuite.repositories.order import OrderItemRepository, OrderRepository
from swagsuite.schemas.order import OrderCreate, OrderItemCreate, OrderUpdate
from swagsuite.services.activity import ActivityService, ProjectTimelineService

logger = logging.getLogger(__name__)


def generate_order_number() -> str:
    return f"ORD-{int(time.time() * 1000)}"


class OrderService:
    def __init__(self, session: AsyncSession, user_id: str):
        self._repo = OrderRepository(session)
        self._items = OrderItemRepository(session)
        self._activity = ActivityService(session, user_id)
        self._timeline = ProjectTimelineService(session, user_id)
        self._user_id = user_id

    async def list_orders(
        self,
        pagination: PaginationParams,
        status: str | None = None,
        company_id: str | None = None,
    ):
        filters = {"status": status, "company_id": company_id}
        return await self._repo.list(**pagination.as_list_kwargs(), filters=filters)

    async def get_order(self, order_id: str) -> Order:
        order = await self._repo.get_by_id(order_id)
        if not order:
            raise NotFoundError("Order", order_id)
        return order

    async def create_order(self, data: OrderCreate) -> Order:
        values = data.model_dump(exclude_none=True)
        values.setdefault("assigned_user_id", self._user_id)
        values.setdefault("order_number", generate_order_number())
        if await self._repo.count({"order_number": values["order_number"]}):
            raise ConflictError(f"Order number '{values['order_number']}' already exists")

        order = await self._repo.create(**values)
        await self._activity.log(
            "order", order.id, "created", f"Created order: {order.order_number}"
        )
        logger.info("Order %s created (%s)", order.order_number, order.status)
        return order

    async def update_order(self, order_id: str, data: OrderUpdate) -> Order:
        existing = await self.get_order(order_id)
        old_status = existing.status
        order = await self._repo.update(
            order_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        await self._activity.log(
            "order", order_id, "updated", f"Updated order: {order.order_number}"
        )
        if data.status and data.status != old_status:
            await self._timeline.record_status_change(order_id, old_status, data.status)
        return order  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Line items
    # ------------------------------------------------------------------

    async def list_items(self, order_id: str) -> list[OrderItem]:
        _ = await self.get_order(order_id)
        return await self._items.for_order(order_id)

    async def add_item(self, order_id: str, data: OrderItemCreate) -> OrderItem:
        _ = await self.get_order(order_id)
        values = data.model_dump(exclude_none=True)
        if data.total_price is None:
            values["total_price"] = data.unit_price * data.quantity
        return await self._items.create(order_id=order_id, **values)
