"""S&S Activewear Pydantic schemas.

``SsProduct`` mirrors the vendor's wire format (camelCase, ``styleID``) and is
what the HTTP client returns; the ``*Out`` models describe our own API.
"""


from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from swagsuite.schemas.common import CamelModel


class SsProduct(BaseModel):
    """One product row as returned by ``GET /V2/products/``."""

    sku: str
    gtin: str | None = None
    style_id: int | None = Field(default=None, alias="styleID")
    brand_name: str | None = None
    style_name: str | None = None
    color_name: str | None = None
    color_code: str | None = None
    size_name: str | None = None
    size_code: str | None = None
    unit_weight: float | None = None
    case_qty: int | None = None
    piece_price: float | None = None
    dozen_price: float | None = None
    case_price: float | None = None
    customer_price: float | None = None
    qty: int | None = None
    color_front_image: str | None = None
    color_back_image: str | None = None
    color_side_image: str | None = None
    color_swatch_image: str | None = None
    country_of_origin: str | None = None

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "extra": "ignore",
    }


class SsProductOut(CamelModel):
    sku: str
    gtin: str | None = None
    style_id: int | None = None
    brand_name: str | None = None
    style_name: str | None = None
    color_name: str | None = None
    color_code: str | None = None
    size_name: str | None = None
    size_code: str | None = None
    unit_weight: float | None = None
    case_qty: int | None = None
    piece_price: float | None = None
    dozen_price: float | None = None
    case_price: float | None = None
    customer_price: float | None = None
    qty: int | None = None
    color_front_image: str | None = None
    color_back_image: str | None = None
    color_side_image: str | None = None
    color_swatch_image: str | None = None
    country_of_origin: str | None = None


class SsCatalogProductOut(CamelModel):
    """A product stored locally by an import job."""

    id: str
    sku: str
    gtin: str | None = None
    style_id: int | None = None
    brand_name: str | None = None
    style_name: str | None = None
    color_name: str | None = None
    size_name: str | None = None
    piece_price: Decimal | None = None
    case_price: Decimal | None = None
    customer_price: Decimal | None = None
    qty: int | None = None
    color_front_image: str | None = None
    is_active: bool
    last_synced_at: datetime | None = None


class ImportRequest(CamelModel):
    style_filter: str | None = Field(default=None, max_length=50)


class ImportStarted(CamelModel):
    job_id: str
    status: str


class ImportJobOut(CamelModel):
    id: str
    user_id: str | None = None
    status: str
    style_filter: str | None = None
    total_products: int
    processed_products: int
    new_products: int
    updated_products: int
    error_count: int
    error_message: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime


class ConnectionStatus(CamelModel):
    connected: bool
