"""Dashboard, third-party integration and report routers.

Dashboard totals come from the database; leaderboard, automation tasks,
news and the HubSpot/Slack integrations return canned data.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.response import DataResponse, ItemsResponse
from swagsuite.db.base import get_db
from swagsuite.schemas.common import MessageResponse
from swagsuite.schemas.dashboard import (
    DashboardStats,
    HubSpotSyncRequest,
    QueryRequest,
    ReportOut,
    ReportSuggestion,
    SlackMessageRequest,
)
from swagsuite.schemas.order import OrderOut
from swagsuite.services import mock_integrations
from swagsuite.services.dashboard import DashboardService
from swagsuite.services.reports import ReportAIService, ReportService, get_report_ai_service

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])
integrations_router = APIRouter(prefix="/api/integrations", tags=["Integrations"])
reports_router = APIRouter(prefix="/api/reports", tags=["Reports"])


# ------------------------------------------------------------------
# Dashboard
# ------------------------------------------------------------------

@router.get("/stats", response_model=DataResponse[DashboardStats])
async def dashboard_stats(session: AsyncSession = Depends(get_db)):
    return {"data": await DashboardService(session).stats()}


@router.get("/recent-orders", response_model=ItemsResponse[OrderOut])
async def recent_orders(
    limit: int = Query(default=10, ge=1, le=100),
    session: AsyncSession = Depends(get_db),
):
    orders = await DashboardService(session).recent_orders(limit)
    return {"data": [OrderOut.model_validate(o) for o in orders]}


@router.get("/enhanced-stats", response_model=DataResponse[dict[str, Any]])
async def enhanced_stats(session: AsyncSession = Depends(get_db)):
    return {"data": await DashboardService(session).enhanced_stats()}


@router.get("/team-leaderboard", response_model=ItemsResponse[dict[str, Any]])
async def team_leaderboard():
    return {"data": mock_integrations.team_leaderboard()}


@router.get("/automation-tasks", response_model=ItemsResponse[dict[str, Any]])
async def automation_tasks():
    return {"data": mock_integrations.automation_tasks()}


@router.get("/news-alerts", response_model=ItemsResponse[dict[str, Any]])
async def news_alerts():
    return {"data": mock_integrations.news_alerts()}


# ------------------------------------------------------------------
# Integrations
# ------------------------------------------------------------------

@integrations_router.get("/hubspot/status", response_model=DataResponse[dict[str, Any]])
async def hubspot_status():
    return {"data": mock_integrations.hubspot_status()}


@integrations_router.get("/hubspot/metrics", response_model=DataResponse[dict[str, Any]])
async def hubspot_metrics():
    return {"data": mock_integrations.hubspot_metrics()}


@integrations_router.post("/hubspot/sync", response_model=DataResponse[MessageResponse])
async def hubspot_sync(body: Optional[HubSpotSyncRequest] = None):
    sync_type = body.sync_type if body else None
    return {"data": mock_integrations.hubspot_sync(sync_type)}


@integrations_router.get("/slack/channels", response_model=ItemsResponse[dict[str, Any]])
async def slack_channels():
    return {"data": mock_integrations.slack_channels()}


@integrations_router.get("/slack/messages", response_model=ItemsResponse[dict[str, Any]])
async def slack_messages():
    return {"data": mock_integrations.slack_messages()}


@integrations_router.post("/slack/send", response_model=DataResponse[MessageResponse])
async def slack_send(body: SlackMessageRequest):
    return {"data": mock_integrations.slack_send(body.channel, body.message)}


@integrations_router.get("/news/items", response_model=ItemsResponse[dict[str, Any]])
async def news_items():
    return {"data": mock_integrations.news_items()}


# ------------------------------------------------------------------
# Reports
# ------------------------------------------------------------------

@reports_router.get("/suggestions", response_model=ItemsResponse[ReportSuggestion])
async def report_suggestions():
    return {"data": ReportService().suggestions()}


@reports_router.post("/generate", response_model=DataResponse[ReportOut])
async def generate_report(
    body: QueryRequest,
    session: AsyncSession = Depends(get_db),
    ai: Optional[ReportAIService] = Depends(get_report_ai_service),
):
    """Summarize current figures for ``query`` (model-written when OpenAI is configured)."""
    stats = await DashboardService(session).stats()
    return {"data": await ReportService(ai).generate(body.query, stats)}
