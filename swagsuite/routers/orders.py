"""Order and order line item router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.deps import get_current_user_id
from swagsuite.core.pagination import PaginationParams
from swagsuite.core.response import DataResponse, ItemsResponse, ListResponse, paginated
from swagsuite.db.base import get_db
from swagsuite.schemas.order import (
    OrderCreate,
    OrderItemCreate,
    OrderItemOut,
    OrderOut,
    OrderStatus,
    OrderUpdate,
)
from swagsuite.services.order import OrderService

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def _svc(session: AsyncSession, user_id: str) -> OrderService:
    return OrderService(session, user_id)


@router.get("", response_model=ListResponse[OrderOut])
async def list_orders(
    filter_status: Optional[OrderStatus] = Query(default=None, alias="status"),
    company_id: Optional[str] = Query(default=None, alias="companyId"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """List orders (paginated). ``status`` and ``companyId`` filters combine."""
    items, total = await _svc(session, user_id).list_orders(
        pagination, status=filter_status, company_id=company_id,
    )
    return paginated([OrderOut.model_validate(o) for o in items], total, pagination)


@router.post("", response_model=DataResponse[OrderOut], status_code=status.HTTP_201_CREATED)
async def create_order(
    body: OrderCreate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    order = await _svc(session, user_id).create_order(body)
    return {"data": OrderOut.model_validate(order)}


@router.get("/{order_id}", response_model=DataResponse[OrderOut])
async def get_order(
    order_id: str,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    order = await _svc(session, user_id).get_order(order_id)
    return {"data": OrderOut.model_validate(order)}


@router.patch("/{order_id}", response_model=DataResponse[OrderOut])
async def update_order(
    order_id: str,
    body: OrderUpdate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    order = await _svc(session, user_id).update_order(order_id, body)
    return {"data": OrderOut.model_validate(order)}


@router.get("/{order_id}/items", response_model=ItemsResponse[OrderItemOut])
async def list_order_items(
    order_id: str,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    items = await _svc(session, user_id).list_items(order_id)
    return {"data": [OrderItemOut.model_validate(i) for i in items]}


@router.post(
    "/{order_id}/items",
    response_model=DataResponse[OrderItemOut],
    status_code=status.HTTP_201_CREATED,
)
async def add_order_item(
    order_id: str,
    body: OrderItemCreate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    item = await _svc(session, user_id).add_item(order_id, body)
    return {"data": OrderItemOut.model_validate(item)}
