"""Company and contact Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from swagsuite.schemas.common import CamelModel

class CompanyCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    industry: str | None = None
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    notes: str | None = None

class CompanyUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    industry: str | None = None
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    notes: str | None = None

class CompanyOut(CamelModel):
    id: str
    name: str
    industry: str | None = None
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

class ContactCreate(CamelModel):
    company_id: str | None = None
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    title: str | None = None
    email: str | None = None
    phone: str | None = None
    is_primary: bool = False
    notes: str | None = None

class ContactUpdate(CamelModel):
    company_id: str | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    title: str | None = None
    email: str | None = None
    phone: str | None = None
    is_primary: bool | None = None
    notes: str | None = None

class ContactOut(CamelModel):
    id: str
    company_id: str | None = None
    first_name: str
    last_name: str
    title: str | None = None
    email: str | None = None
    phone: str | None = None
    is_primary: bool
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
