"""Company (customer) and contact services."""


from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import BadRequestError, NotFoundError
from swagsuite.core.pagination import PaginationParams
from swagsuite.domain.company import Company, Contact
from swagsuite.repositories.company import CompanyRepository, ContactRepository
from swagsuite.schemas.company import CompanyCreate, CompanyUpdate, ContactCreate, ContactUpdate
from swagsuite.services.activity import ActivityService

class CompanyService:
    def __init__(self, session: AsyncSession, user_id: str | None = None):
        self._repo = CompanyRepository(session)
        self._activity = ActivityService(session, user_id)

    async def list_companies(self, pagination: PaginationParams):
        return await self._repo.list(**pagination.as_list_kwargs())

    async def search_companies(self, query: str | None) -> list[Company]:
        if not query or not query.strip():
            raise BadRequestError("Search query is required")
        return await self._repo.search(query.strip())

    async def get_company(self, company_id: str) -> Company:
        company = await self._repo.get_by_id(company_id)
        if not company:
            raise NotFoundError("Company", company_id)
        return company

    async def create_company(self, data: CompanyCreate) -> Company:
        company = await self._repo.create(**data.model_dump(exclude_none=True))
        await self._activity.log(
            "company", company.id, "created", f"Created company: {company.name}"
        )
        return company

    async def update_company(self, company_id: str, data: CompanyUpdate) -> Company:
        _ = await self.get_company(company_id)  # raises 404 if missing
        company = await self._repo.update(company_id, **data.model_dump(exclude_none=True, exclude_unset=True))
        await self._activity.log(
            "company", company_id, "updated", f"Updated company: {company.name}"
        )
        return company  # type: ignore[return-value]

    async def delete_company(self, company_id: str) -> None:
        deleted = await self._repo.delete(company_id)
        if not deleted:
            raise NotFoundError("Company", company_id)
        await self._activity.log("company", company_id, "deleted", "Deleted company")


class ContactService:
    def __init__(self, session: AsyncSession):
        self._repo = ContactRepository(session)
        self._companies = CompanyRepository(session)

    async def list_contacts(self, pagination: PaginationParams, company_id: str | None = None):
        filters = {"company_id": company_id} if company_id else None
        return await self._repo.list(**pagination.as_list_kwargs(), filters=filters)

    async def get_contact(self, contact_id: str) -> Contact:
        contact = await self._repo.get_by_id(contact_id)
        if not contact:
            raise NotFoundError("Contact", contact_id)
        return contact

    async def _check_company(self, company_id: str | None) -> None:
        if company_id and not await self._companies.get_by_id(company_id):
            raise NotFoundError("Company", company_id)

    async def create_contact(self, data: ContactCreate) -> Contact:
        await self._check_company(data.company_id)
        return await self._repo.create(**data.model_dump(exclude_none=True))

    async def update_contact(self, contact_id: str, data: ContactUpdate) -> Contact:
        _ = await self.get_contact(contact_id)
        await self._check_company(data.company_id)
        updated = await self._repo.update(contact_id, **data.model_dump(exclude_none=True, exclude_unset=True))
        return updated  # type: ignore[return-value]

    async def delete_contact(self, contact_id: str) -> None:
        if not await self._repo.delete(contact_id):
            raise NotFoundError("Contact", contact_id)
