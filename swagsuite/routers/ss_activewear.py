"""S&S Activewear supplier integration router.

Live lookups go straight to the vendor API through the shared client;
imports are accepted with 202 and run as a background task that records
its progress on an import job row.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from swagsuite.core.deps import get_current_user_id, get_ss_activewear_client
from swagsuite.core.exceptions import BadRequestError, NotFoundError
from swagsuite.core.pagination import PaginationParams
from swagsuite.core.response import DataResponse, ItemsResponse, ListResponse, paginated
from swagsuite.db.base import get_db, get_session_factory
from swagsuite.integrations.ss_activewear import SsActivewearClient
from swagsuite.schemas.ss_activewear import (
    ConnectionStatus,
    ImportJobOut,
    ImportRequest,
    ImportStarted,
    SsCatalogProductOut,
    SsProductOut,
)
from swagsuite.services.ss_activewear import (
    SsActivewearCatalogService,
    SsActivewearImportService,
)


router = APIRouter(prefix="/api/ss-activewear", tags=["S&S Activewear"])


def _product_out(product) -> SsProductOut:
    return SsProductOut.model_validate(product.model_dump())


# ------------------------------------------------------------------
# Live vendor lookups
# ------------------------------------------------------------------

@router.get("/test-connection", response_model=DataResponse[ConnectionStatus])
async def test_connection(client: SsActivewearClient = Depends(get_ss_activewear_client)):
    return {"data": ConnectionStatus(connected=await client.test_connection())}


@router.get("/search", response_model=ItemsResponse[SsProductOut])
async def search_products(
    q: Optional[str] = Query(default=None, description="SKU, style number, brand or style name"),
    client: SsActivewearClient = Depends(get_ss_activewear_client),
):
    if not q or not q.strip():
        raise BadRequestError("Search query is required")
    products = await client.search_products(q.strip())
    return {"data": [_product_out(p) for p in products]}


@router.get("/products/{sku}", response_model=DataResponse[SsProductOut])
async def get_product(sku: str, client: SsActivewearClient = Depends(get_ss_activewear_client)):
    product = await client.get_product_by_sku(sku)
    if product is None:
        raise NotFoundError("S&S product", sku)
    return {"data": _product_out(product)}


@router.get("/categories", response_model=ItemsResponse[dict[str, Any]])
async def get_categories(client: SsActivewearClient = Depends(get_ss_activewear_client)):
    return {"data": await client.get_categories()}


@router.get("/brands", response_model=ItemsResponse[dict[str, Any]])
async def get_brands(client: SsActivewearClient = Depends(get_ss_activewear_client)):
    return {"data": await client.get_brands()}


# ------------------------------------------------------------------
# Catalog import
# ------------------------------------------------------------------

@router.post("/import", response_model=DataResponse[ImportStarted], status_code=status.HTTP_202_ACCEPTED)
async def start_import(
    background_tasks: BackgroundTasks,
    body: Optional[ImportRequest] = None,
    client: SsActivewearClient = Depends(get_ss_activewear_client),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    user_id: str = Depends(get_current_user_id),
):
    """Queue a catalog import for ``styleFilter`` (a sample style when omitted)."""
    style = body.style_filter if body else None
    service = SsActivewearImportService(session_factory, client)
    job = await service.create_job(user_id, style)
    background_tasks.add_task(service.run_import, job.id, style)
    return {"data": ImportStarted(job_id=job.id, status=job.status)}


@router.get("/import-jobs", response_model=ListResponse[ImportJobOut])
async def list_import_jobs(
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
    _client: SsActivewearClient = Depends(get_ss_activewear_client),
):
    items, total = await SsActivewearCatalogService(session).list_jobs(pagination)
    return paginated([ImportJobOut.model_validate(j) for j in items], total, pagination)


@router.get("/import-jobs/{job_id}", response_model=DataResponse[ImportJobOut])
async def get_import_job(
    job_id: str,
    session: AsyncSession = Depends(get_db),
    _client: SsActivewearClient = Depends(get_ss_activewear_client),
):
    job = await SsActivewearCatalogService(session).get_job(job_id)
    return {"data": ImportJobOut.model_validate(job)}


@router.get("/catalog", response_model=ListResponse[SsCatalogProductOut])
async def list_catalog(
    brand_name: Optional[str] = Query(default=None, alias="brandName"),
    style_id: Optional[int] = Query(default=None, alias="styleId"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
    _client: SsActivewearClient = Depends(get_ss_activewear_client),
):
    """Products mirrored locally by import jobs."""
    items, total = await SsActivewearCatalogService(session).list_catalog(
        pagination, brand_name=brand_name, style_id=style_id,
    )
    return paginated([SsCatalogProductOut.model_validate(p) for p in items], total, pagination)
