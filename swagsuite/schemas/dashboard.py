"""Dashboard, search and report Pydantic schemas."""


from decimal import Decimal
from typing import Any

from pydantic import Field

from swagsuite.schemas.common import CamelModel
from swagsuite.schemas.company import CompanyOut
from swagsuite.schemas.order import OrderOut
from swagsuite.schemas.supplier import ProductOut

class DashboardStats(CamelModel):
    total_revenue: Decimal
    active_orders: int
    total_companies: int
    total_products: int
    orders_by_status: dict[str, int]

class SearchResults(CamelModel):
    companies: list[CompanyOut]
    products: list[ProductOut]
    orders: list[OrderOut]

class QueryRequest(CamelModel):
    query: str = Field(min_length=1, max_length=2000)

class AISearchResponse(CamelModel):
    query: str
    results: list[Any]
    message: str

class ReportOut(CamelModel):
    id: str
    name: str
    query: str
    data: list[Any]
    summary: str
    generated_at: str
    export_formats: list[str]
    ai_generated: bool = False

class ReportSuggestion(CamelModel):
    title: str
    description: str
    query: str
    category: str

class HubSpotSyncRequest(CamelModel):
    sync_type: str | None = Field(default=None, max_length=50)

class SlackMessageRequest(CamelModel):
    channel: str | None = Field(default=None, max_length=100)
    message: str | None = Field(default=None, max_length=4000)
