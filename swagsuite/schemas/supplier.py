"""Supplier and product Pydantic schemas."""


from datetime import datetime
from decimal import Decimal

from pydantic import Field

from swagsuite.schemas.common import CamelModel

class SupplierCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    payment_terms: str | None = None
    notes: str | None = None
    api_integration_status: str | None = None

class SupplierUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    payment_terms: str | None = None
    notes: str | None = None
    api_integration_status: str | None = None

class SupplierOut(CamelModel):
    id: str
    name: str
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    payment_terms: str | None = None
    notes: str | None = None
    api_integration_status: str | None = None
    created_at: datetime
    updated_at: datetime

class ProductCreate(CamelModel):
    supplier_id: str | None = None
    name: str = Field(min_length=1, max_length=255)
    sku: str | None = None
    description: str | None = None
    category: str | None = None
    base_price: Decimal | None = Field(default=None, ge=0)
    minimum_quantity: int = Field(default=1, ge=1)
    colors: list[str] | None = None
    sizes: list[str] | None = None
    imprint_methods: list[str] | None = None
    lead_time: int | None = Field(default=None, ge=0)
    image_url: str | None = None

class ProductUpdate(CamelModel):
    supplier_id: str | None = None
    name: str | None = Field(default=None, min_length=1, max_length=255)
    sku: str | None = None
    description: str | None = None
    category: str | None = None
    base_price: Decimal | None = Field(default=None, ge=0)
    minimum_quantity: int | None = Field(default=None, ge=1)
    colors: list[str] | None = None
    sizes: list[str] | None = None
    imprint_methods: list[str] | None = None
    lead_time: int | None = Field(default=None, ge=0)
    image_url: str | None = None

class ProductOut(CamelModel):
    id: str
    supplier_id: str | None = None
    name: str
    sku: str | None = None
    description: str | None = None
    category: str | None = None
    base_price: Decimal | None = None
    minimum_quantity: int
    colors: list[str] | None = None
    sizes: list[str] | None = None
    imprint_methods: list[str] | None = None
    lead_time: int | None = None
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime
