"""Error (incident) repository with aggregate statistics."""


from decimal import Decimal

from sqlalchemy import func, select

from swagsuite.domain.error import ErrorRecord
from swagsuite.repositories.base import BaseRepository


class ErrorRepository(BaseRepository[ErrorRecord]):
    model = ErrorRecord
    search_columns = ("project_number", "client_name", "vendor_name")

    async def count_grouped(self, column_name: str) -> dict[str, int]:
        col = getattr(ErrorRecord, column_name)
        q = select(col, func.count()).group_by(col)
        return {key: count for key, count in (await self._session.execute(q)).all()}

    async def total_cost(self) -> Decimal:
        q = select(func.coalesce(func.sum(ErrorRecord.cost_to_lsd), 0))
        return Decimal(str((await self._session.execute(q)).scalar_one()))
