"""Universal search across companies, products and orders."""


from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import BadRequestError
from swagsuite.repositories.company import CompanyRepository
from swagsuite.repositories.order import OrderRepository
from swagsuite.repositories.supplier import ProductRepository

RESULTS_PER_ENTITY = 5


class SearchService:
    def __init__(self, session: AsyncSession):
        self._companies = CompanyRepository(session)
        self._products = ProductRepository(session)
        self._orders = OrderRepository(session)

    async def search(self, query: str | None) -> dict:
        if not query or not query.strip():
            raise BadRequestError("Search query is required")
        term = query.strip()
        # An AsyncSession runs one statement at a time
        companies = await self._companies.search(term, limit=RESULTS_PER_ENTITY)
        products = await self._products.search(term, limit=RESULTS_PER_ENTITY)
        orders = await self._orders.search(term, limit=RESULTS_PER_ENTITY)
        return {"companies": companies, "products": products, "orders": orders}
