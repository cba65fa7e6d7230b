"""S&S Activewear catalog mirror and import job repositories."""


from swagsuite.domain.ss_activewear import SsActivewearImportJob, SsActivewearProduct
from swagsuite.repositories.base import BaseRepository


class SsActivewearProductRepository(BaseRepository[SsActivewearProduct]):
    model = SsActivewearProduct
    search_columns = ("sku", "brand_name", "style_name")

    async def get_by_sku(self, sku: str) -> SsActivewearProduct | None:
        items = await self.list_all(filters={"sku": sku})
        return items[0] if items else None


class SsActivewearImportJobRepository(BaseRepository[SsActivewearImportJob]):
    model = SsActivewearImportJob
