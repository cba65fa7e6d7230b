"""S&S Activewear catalog import jobs and the locally mirrored catalog.

An import runs after the triggering request has returned, so it opens its
own sessions from the session factory instead of borrowing the request's.
Each product is upserted in its own transaction: a malformed or unstorable
row is counted in ``error_count`` and the import moves on.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from swagsuite.core.exceptions import AppException, NotFoundError
from swagsuite.core.pagination import PaginationParams
from swagsuite.domain.ss_activewear import SsActivewearImportJob
from swagsuite.integrations.ss_activewear import SsActivewearClient
from swagsuite.repositories.ss_activewear import (
    SsActivewearImportJobRepository,
    SsActivewearProductRepository,
)
from swagsuite.schemas.ss_activewear import SsProduct

logger = logging.getLogger(__name__)

# Job counters are written back after this many processed products
PROGRESS_FLUSH_EVERY = 10

_DECIMAL_FIELDS = (
    "unit_weight",
    "piece_price",
    "dozen_price",
    "case_price",
    "customer_price",
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _catalog_values(product: SsProduct) -> dict[str, Any]:
    values = product.model_dump(exclude={"sku"})
    for field in _DECIMAL_FIELDS:
        if values[field] is not None:
            values[field] = Decimal(str(values[field]))
    values["is_active"] = True
    values["last_synced_at"] = _now()
    return values


class SsActivewearImportService:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        client: SsActivewearClient,
    ):
        self._session_factory = session_factory
        self._client = client

    async def create_job(
        self, user_id: str | None, style_filter: str | None = None
    ) -> SsActivewearImportJob:
        async with self._session_factory() as session:
            job = await SsActivewearImportJobRepository(session).create(
                user_id=user_id, status="pending", style_filter=style_filter,
            )
            await session.commit()
        logger.info("Created S&S import job %s (style=%s)", job.id, style_filter)
        return job

    async def _update_job(self, job_id: str, **values: Any) -> None:
        async with self._session_factory() as session:
            await SsActivewearImportJobRepository(session).update(job_id, **values)
            await session.commit()

    async def _upsert(self, product: SsProduct) -> bool:
        """Insert or refresh one catalog row. Returns ``True`` when it was new."""
        async with self._session_factory() as session:
            repo = SsActivewearProductRepository(session)
            values = _catalog_values(product)
            existing = await repo.get_by_sku(product.sku)
            if existing:
                await repo.update(existing.id, **values)
            else:
                await repo.create(sku=product.sku, **values)
            await session.commit()
        return existing is None

    async def run_import(self, job_id: str, style: Optional[str] = None) -> None:
        """Fetch products from S&S and mirror them into the local catalog.

        Never raises: failures are recorded on the job row.
        """
        await self._update_job(job_id, status="running", started_at=_now())
        try:
            rows = await self._client.get_product_rows(style)
        except (AppException, httpx.HTTPError) as exc:
            message = getattr(exc, "message", None) or str(exc)
            logger.error("S&S import job %s failed: %s", job_id, message)
            await self._update_job(
                job_id, status="failed", error_message=message, completed_at=_now(),
            )
            return

        total = len(rows)
        await self._update_job(job_id, total_products=total)

        processed = new = updated = errors = 0
        for row in rows:
            try:
                product = SsProduct.model_validate(row)
            except PydanticValidationError:
                logger.warning("S&S import job %s: skipping malformed row %r", job_id, row)
                errors += 1
            else:
                try:
                    if await self._upsert(product):
                        new += 1
                    else:
                        updated += 1
                except Exception:
                    logger.exception("S&S import job %s: failed to store %s", job_id, product.sku)
                    errors += 1
            processed += 1
            if processed % PROGRESS_FLUSH_EVERY == 0:
                await self._update_job(
                    job_id,
                    processed_products=processed,
                    new_products=new,
                    updated_products=updated,
                    error_count=errors,
                )

        await self._update_job(
            job_id,
            status="completed",
            processed_products=processed,
            new_products=new,
            updated_products=updated,
            error_count=errors,
            completed_at=_now(),
        )
        logger.info(
            "S&S import job %s completed: %d total, %d new, %d updated, %d errors",
            job_id, total, new, updated, errors,
        )


class SsActivewearCatalogService:
    """Read access to import jobs and the mirrored catalog (request-scoped)."""

    def __init__(self, session: AsyncSession):
        self._jobs = SsActivewearImportJobRepository(session)
        self._products = SsActivewearProductRepository(session)

    async def list_jobs(self, pagination: PaginationParams):
        return await self._jobs.list(**pagination.as_list_kwargs())

    async def get_job(self, job_id: str) -> SsActivewearImportJob:
        job = await self._jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError("Import job", job_id)
        return job

    async def list_catalog(
        self,
        pagination: PaginationParams,
        brand_name: str | None = None,
        style_id: int | None = None,
    ):
        filters = {"brand_name": brand_name, "style_id": style_id}
        return await self._products.list(**pagination.as_list_kwargs(), filters=filters)
