"""Order error (incident) tracking service."""


from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import NotFoundError
from swagsuite.core.pagination import PaginationParams
from swagsuite.domain.error import ErrorRecord
from swagsuite.repositories.error import ErrorRepository
from swagsuite.schemas.error import ErrorCreate, ErrorStatistics, ErrorUpdate

class ErrorService:
    def __init__(self, session: AsyncSession, user_id: str | None = None):
        self._repo = ErrorRepository(session)
        self._user_id = user_id

    async def list_errors(
        self,
        pagination: PaginationParams,
        is_resolved: bool | None = None,
        error_type: str | None = None,
        responsible_party: str | None = None,
    ):
        filters = {
            "is_resolved": is_resolved,
            "error_type": error_type,
            "responsible_party": responsible_party,
        }
        return await self._repo.list(**pagination.as_list_kwargs(), filters=filters)

    async def get_error(self, error_id: str) -> ErrorRecord:
        record = await self._repo.get_by_id(error_id)
        if not record:
            raise NotFoundError("Error", error_id)
        return record

    async def create_error(self, data: ErrorCreate) -> ErrorRecord:
        values = data.model_dump(exclude_none=True)
        if data.is_resolved:
            values["resolved_at"] = datetime.now(timezone.utc)
            values["resolved_by"] = self._user_id
        return await self._repo.create(**values, created_by=self._user_id)

    async def update_error(self, error_id: str, data: ErrorUpdate) -> ErrorRecord:
        existing = await self.get_error(error_id)
        values = data.model_dump(exclude_none=True, exclude_unset=True)
        if data.is_resolved is True and not existing.is_resolved:
            values["resolved_at"] = datetime.now(timezone.utc)
            values["resolved_by"] = self._user_id
        elif data.is_resolved is False:
            values["resolved_at"] = None
            values["resolved_by"] = None
        updated = await self._repo.update(error_id, **values)
        return updated  # type: ignore[return-value]

    async def resolve_error(self, error_id: str) -> ErrorRecord:
        existing = await self.get_error(error_id)
        if existing.is_resolved:
            return existing
        updated = await self._repo.update(
            error_id,
            is_resolved=True,
            resolved_at=datetime.now(timezone.utc),
            resolved_by=self._user_id,
        )
        return updated  # type: ignore[return-value]

    async def statistics(self) -> ErrorStatistics:
        total = await self._repo.count()
        resolved = await self._repo.count({"is_resolved": True})
        return ErrorStatistics(
            total_errors=total,
            resolved_errors=resolved,
            unresolved_errors=total - resolved,
            cost_to_lsd=await self._repo.total_cost(),
            errors_by_type=await self._repo.count_grouped("error_type"),
            errors_by_responsible_party=await self._repo.count_grouped("responsible_party"),
        )
