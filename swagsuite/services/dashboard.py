"""Dashboard figures computed from the orders, companies and products tables."""


from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.domain.order import Order
from swagsuite.repositories.company import CompanyRepository
from swagsuite.repositories.order import OrderRepository
from swagsuite.repositories.supplier import ProductRepository
from swagsuite.schemas.dashboard import DashboardStats

# Orders in these states no longer count as work in progress
CLOSED_STATUSES = ("delivered", "cancelled")
UNBILLED_STATUSES = ("cancelled",)

# Period metrics are not tracked yet; the dashboard shows fixed figures
ENHANCED_PERIOD_METRICS = {
    "ytdRevenue": 2850000,
    "lastYearYtdRevenue": 2200000,
    "mtdRevenue": 285000,
    "lastMonthRevenue": 260000,
    "wtdRevenue": 65000,
    "todayRevenue": 12000,
    "pipelineValue": 1200000,
    "conversionRate": 24.5,
    "avgOrderValue": 3200,
    "orderQuantity": 890,
}


class DashboardService:
    def __init__(self, session: AsyncSession):
        self._orders = OrderRepository(session)
        self._companies = CompanyRepository(session)
        self._products = ProductRepository(session)

    async def stats(self) -> DashboardStats:
        by_status = await self._orders.count_by_status()
        active = sum(n for s, n in by_status.items() if s not in CLOSED_STATUSES)
        return DashboardStats(
            total_revenue=await self._orders.revenue(exclude_statuses=UNBILLED_STATUSES),
            active_orders=active,
            total_companies=await self._companies.count(),
            total_products=await self._products.count(),
            orders_by_status=by_status,
        )

    async def enhanced_stats(self) -> dict:
        base = (await self.stats()).model_dump(by_alias=True, mode="json")
        return {**base, **ENHANCED_PERIOD_METRICS}

    async def recent_orders(self, limit: int = 10) -> list[Order]:
        return await self._orders.recent(limit)
