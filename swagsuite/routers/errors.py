"""Order error tracking router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.deps import get_current_user_id
from swagsuite.core.pagination import PaginationParams
from swagsuite.core.response import DataResponse, ListResponse, paginated
from swagsuite.db.base import get_db
from swagsuite.schemas.error import (
    ErrorCreate,
    ErrorOut,
    ErrorStatistics,
    ErrorType,
    ErrorUpdate,
    ResponsibleParty,
)
from swagsuite.services.error import ErrorService

router = APIRouter(prefix="/api/errors", tags=["Errors"])


@router.get("", response_model=ListResponse[ErrorOut])
async def list_errors(
    is_resolved: Optional[bool] = Query(default=None, alias="isResolved"),
    error_type: Optional[ErrorType] = Query(default=None, alias="errorType"),
    responsible_party: Optional[ResponsibleParty] = Query(default=None, alias="responsibleParty"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    items, total = await ErrorService(session).list_errors(
        pagination,
        is_resolved=is_resolved,
        error_type=error_type,
        responsible_party=responsible_party,
    )
    return paginated([ErrorOut.model_validate(e) for e in items], total, pagination)


@router.get("/statistics", response_model=DataResponse[ErrorStatistics])
async def error_statistics(session: AsyncSession = Depends(get_db)):
    return {"data": await ErrorService(session).statistics()}


@router.post("", response_model=DataResponse[ErrorOut], status_code=status.HTTP_201_CREATED)
async def create_error(
    body: ErrorCreate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    record = await ErrorService(session, user_id).create_error(body)
    return {"data": ErrorOut.model_validate(record)}


@router.get("/{error_id}", response_model=DataResponse[ErrorOut])
async def get_error(error_id: str, session: AsyncSession = Depends(get_db)):
    record = await ErrorService(session).get_error(error_id)
    return {"data": ErrorOut.model_validate(record)}


@router.put("/{error_id}", response_model=DataResponse[ErrorOut])
async def update_error(
    error_id: str,
    body: ErrorUpdate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    record = await ErrorService(session, user_id).update_error(error_id, body)
    return {"data": ErrorOut.model_validate(record)}


@router.post("/{error_id}/resolve", response_model=DataResponse[ErrorOut])
async def resolve_error(
    error_id: str,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    record = await ErrorService(session, user_id).resolve_error(error_id)
    return {"data": ErrorOut.model_validate(record)}
