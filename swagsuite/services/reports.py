"""Report generation: fixed suggestions plus an optional OpenAI-written summary.

When ``OPENAI_API_KEY`` is configured the summary for a report query is
written by the model from the current dashboard figures. Without a key a
static summary is returned, so the endpoint keeps working in development.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from swagsuite.core.config import settings
from swagsuite.core.exceptions import AIServiceError
from swagsuite.schemas.dashboard import DashboardStats, ReportOut

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ["pdf", "xlsx", "csv"]

REPORT_SUGGESTIONS: List[Dict[str, str]] = [
    {
        "title": "Top Performing Sales Reps",
        "description": "Revenue and conversion metrics by salesperson",
        "query": "Show me the top 10 sales reps by revenue this quarter with their conversion rates",
        "category": "sales",
    },
    {
        "title": "Vendor Spend Analysis",
        "description": "Year-over-year vendor spending comparison",
        "query": "Compare our vendor spending this year vs last year, show top 20 vendors",
        "category": "vendors",
    },
    {
        "title": "Customer Retention Report",
        "description": "Analysis of customer repeat orders and churn",
        "query": "Which customers have stopped ordering in the last 90 days and their previous order history",
        "category": "customers",
    },
    {
        "title": "Product Margin Analysis",
        "description": "Profit margins by product category",
        "query": "Show me profit margins by product category for the last 6 months",
        "category": "finance",
    },
]

# ── System prompt ─────────────────────────────────────────────────────────

REPORT_SUMMARY_PROMPT = """You are a business analyst for a promotional products distributor.

You receive a report request written by a sales or operations user, together
with a JSON snapshot of the company's current figures (revenue, active orders,
customer and product counts, and order counts by status).

Write a short executive summary (at most five sentences) answering the request
using only the figures provided. If the figures cannot answer the request,
say which data would be needed instead. Output plain text only, no markdown."""


class ReportAIService:
    """Thin async wrapper around OpenAI for report summaries."""

    def __init__(self, client: Optional[AsyncOpenAI] = None) -> None:
        if client is None and not settings.ai_enabled:
            raise AIServiceError(
                "OpenAI API key is not configured. Set OPENAI_API_KEY in your .env file."
            )
        self.client = client or AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
        )
        self.model = settings.openai_model
        self.max_tokens = settings.openai_max_tokens

    async def summarize(self, query: str, figures: Dict[str, Any]) -> str:
        """Ask the model for a summary of ``figures`` that answers ``query``."""
        user_message = (
            f"Report request:\n{query}\n\n"
            f"Current figures:\n{json.dumps(figures, indent=2, default=str)}"
        )
        try:
            logger.info(
                "Calling OpenAI model=%s, input_length=%d", self.model, len(user_message)
            )
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": REPORT_SUMMARY_PROMPT},
                    {"role": "user", "content": user_message},
                ],
                max_completion_tokens=self.max_tokens,
            )
        except OpenAIError as exc:
            logger.error("OpenAI API error: %s", exc)
            raise AIServiceError(f"OpenAI service error: {exc}") from exc

        content = response.choices[0].message.content
        if not content:
            raise AIServiceError("Empty response from OpenAI")
        logger.info("OpenAI call successful")
        return content.strip()


def get_report_ai_service() -> Optional[ReportAIService]:
    """Return the AI summarizer, or ``None`` when no OpenAI key is configured."""
    if not settings.ai_enabled:
        return None
    return ReportAIService()


class ReportService:
    def __init__(self, ai: Optional[ReportAIService] = None):
        self._ai = ai

    def suggestions(self) -> List[Dict[str, str]]:
        return REPORT_SUGGESTIONS

    async def generate(self, query: str, stats: DashboardStats) -> ReportOut:
        now = datetime.now(timezone.utc)
        figures = stats.model_dump(by_alias=True, mode="json")
        if self._ai is not None:
            summary = await self._ai.summarize(query, figures)
            ai_generated = True
        else:
            summary = (
                f'Report generated based on your query: "{query}". '
                f"Current totals: {stats.total_companies} companies, "
                f"{stats.total_products} products, {stats.active_orders} active orders."
            )
            ai_generated = False

        return ReportOut(
            id=str(int(time.time() * 1000)),
            name=f"AI Generated Report - {now.date().isoformat()}",
            query=query,
            data=[figures],
            summary=summary,
            generated_at=now.isoformat(),
            export_formats=list(EXPORT_FORMATS),
            ai_generated=ai_generated,
        )
