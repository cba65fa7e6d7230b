"""Error (incident) tracking Pydantic schemas."""


import datetime as dt
from decimal import Decimal
from typing import Literal

from pydantic import Field

from swagsuite.schemas.common import CamelModel

ErrorType = Literal[
    "pricing", "in_hands_date", "shipping", "printing", "artwork_proofing", "oos", "other",
]
ResponsibleParty = Literal["customer", "vendor", "lsd"]
Resolution = Literal["refund", "credit_for_future_order", "reprint", "courier_shipping", "other"]

class ErrorCreate(CamelModel):
    date: dt.date | None = None
    project_number: str | None = None
    order_id: str | None = None
    error_type: ErrorType = "other"
    client_name: str | None = None
    vendor_name: str | None = None
    responsible_party: ResponsibleParty = "lsd"
    resolution: Resolution = "other"
    cost_to_lsd: Decimal = Field(default=Decimal("0"), ge=0)
    production_rep: str | None = None
    order_rep: str | None = None
    client_rep: str | None = None
    additional_notes: str | None = None
    is_resolved: bool = False

class ErrorUpdate(CamelModel):
    date: dt.date | None = None
    project_number: str | None = None
    order_id: str | None = None
    error_type: ErrorType | None = None
    client_name: str | None = None
    vendor_name: str | None = None
    responsible_party: ResponsibleParty | None = None
    resolution: Resolution | None = None
    cost_to_lsd: Decimal | None = Field(default=None, ge=0)
    production_rep: str | None = None
    order_rep: str | None = None
    client_rep: str | None = None
    additional_notes: str | None = None
    is_resolved: bool | None = None

class ErrorOut(CamelModel):
    id: str
    date: dt.date | None = None
    project_number: str | None = None
    order_id: str | None = None
    error_type: str
    client_name: str | None = None
    vendor_name: str | None = None
    responsible_party: str
    resolution: str
    cost_to_lsd: Decimal
    production_rep: str | None = None
    order_rep: str | None = None
    client_rep: str | None = None
    additional_notes: str | None = None
    is_resolved: bool
    resolved_at: dt.datetime | None = None
    resolved_by: str | None = None
    created_by: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime

class ErrorStatistics(CamelModel):
    total_errors: int
    resolved_errors: int
    unresolved_errors: int
    cost_to_lsd: Decimal
    errors_by_type: dict[str, int]
    errors_by_responsible_party: dict[str, int]
