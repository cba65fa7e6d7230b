"""Company and contact CRUD routers."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.deps import get_current_user_id
from swagsuite.core.pagination import PaginationParams
from swagsuite.core.response import DataResponse, ItemsResponse, ListResponse, paginated
from swagsuite.db.base import get_db
from swagsuite.schemas.company import (
    CompanyCreate,
    CompanyOut,
    CompanyUpdate,
    ContactCreate,
    ContactOut,
    ContactUpdate,
)
from swagsuite.services.company import CompanyService, ContactService

router = APIRouter(prefix="/api/companies", tags=["Companies"])
contacts_router = APIRouter(prefix="/api/contacts", tags=["Contacts"])


# ------------------------------------------------------------------
# Companies
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[CompanyOut])
async def list_companies(
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    items, total = await CompanyService(session).list_companies(pagination)
    return paginated([CompanyOut.model_validate(c) for c in items], total, pagination)


@router.get("/search", response_model=ItemsResponse[CompanyOut])
async def search_companies(
    q: Optional[str] = Query(default=None, description="Matches name, industry or email"),
    session: AsyncSession = Depends(get_db),
):
    companies = await CompanyService(session).search_companies(q)
    return {"data": [CompanyOut.model_validate(c) for c in companies]}


@router.get("/{company_id}", response_model=DataResponse[CompanyOut])
async def get_company(company_id: str, session: AsyncSession = Depends(get_db)):
    company = await CompanyService(session).get_company(company_id)
    return {"data": CompanyOut.model_validate(company)}


@router.post("", response_model=DataResponse[CompanyOut], status_code=status.HTTP_201_CREATED)
async def create_company(
    body: CompanyCreate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    company = await CompanyService(session, user_id).create_company(body)
    return {"data": CompanyOut.model_validate(company)}


@router.patch("/{company_id}", response_model=DataResponse[CompanyOut])
async def update_company(
    company_id: str,
    body: CompanyUpdate,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    company = await CompanyService(session, user_id).update_company(company_id, body)
    return {"data": CompanyOut.model_validate(company)}


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: str,
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    await CompanyService(session, user_id).delete_company(company_id)


# ------------------------------------------------------------------
# Contacts
# ------------------------------------------------------------------

@contacts_router.get("", response_model=ListResponse[ContactOut])
async def list_contacts(
    company_id: Optional[str] = Query(default=None, alias="companyId"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    items, total = await ContactService(session).list_contacts(pagination, company_id=company_id)
    return paginated([ContactOut.model_validate(c) for c in items], total, pagination)


@contacts_router.post("", response_model=DataResponse[ContactOut], status_code=status.HTTP_201_CREATED)
async def create_contact(body: ContactCreate, session: AsyncSession = Depends(get_db)):
    contact = await ContactService(session).create_contact(body)
    return {"data": ContactOut.model_validate(contact)}


@contacts_router.get("/{contact_id}", response_model=DataResponse[ContactOut])
async def get_contact(contact_id: str, session: AsyncSession = Depends(get_db)):
    contact = await ContactService(session).get_contact(contact_id)
    return {"data": ContactOut.model_validate(contact)}


@contacts_router.patch("/{contact_id}", response_model=DataResponse[ContactOut])
async def update_contact(
    contact_id: str,
    body: ContactUpdate,
    session: AsyncSession = Depends(get_db),
):
    contact = await ContactService(session).update_contact(contact_id, body)
    return {"data": ContactOut.model_validate(contact)}


@contacts_router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(contact_id: str, session: AsyncSession = Depends(get_db)):
    await ContactService(session).delete_contact(contact_id)
