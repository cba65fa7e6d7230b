"""Universal search router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.response import DataResponse
from swagsuite.db.base import get_db
from swagsuite.schemas.company import CompanyOut
from swagsuite.schemas.dashboard import AISearchResponse, QueryRequest, SearchResults
from swagsuite.schemas.order import OrderOut
from swagsuite.schemas.supplier import ProductOut
from swagsuite.services.search import SearchService

router = APIRouter(prefix="/api/search", tags=["Search"])


@router.get("", response_model=DataResponse[SearchResults])
async def universal_search(
    q: Optional[str] = Query(default=None),
    session: AsyncSession = Depends(get_db),
):
    """Up to five companies, products and orders matching ``q``."""
    found = await SearchService(session).search(q)
    return {
        "data": SearchResults(
            companies=[CompanyOut.model_validate(c) for c in found["companies"]],
            products=[ProductOut.model_validate(p) for p in found["products"]],
            orders=[OrderOut.model_validate(o) for o in found["orders"]],
        )
    }


@router.post("/ai", response_model=DataResponse[AISearchResponse])
async def ai_search(body: QueryRequest):
    # Natural-language search is not wired to a model yet
    return {
        "data": AISearchResponse(
            query=body.query,
            results=[],
            message="AI search is not available yet; use /api/search for keyword search.",
        )
    }
