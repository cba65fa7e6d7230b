"""Order and order item Pydantic schemas."""


from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field

from swagsuite.schemas.common import CamelModel

OrderStatus = Literal[
    "quote",
    "pending_approval",
    "approved",
    "in_production",
    "shipped",
    "delivered",
    "cancelled",
]

class OrderCreate(CamelModel):
    order_number: str | None = Field(default=None, max_length=50)
    company_id: str | None = None
    contact_id: str | None = None
    assigned_user_id: str | None = None
    status: OrderStatus = "quote"
    subtotal: Decimal = Field(default=Decimal("0"), ge=0)
    tax: Decimal = Field(default=Decimal("0"), ge=0)
    shipping: Decimal = Field(default=Decimal("0"), ge=0)
    total: Decimal = Field(default=Decimal("0"), ge=0)
    in_hands_date: date | None = None
    event_date: date | None = None
    notes: str | None = None

class OrderUpdate(CamelModel):
    company_id: str | None = None
    contact_id: str | None = None
    assigned_user_id: str | None = None
    status: OrderStatus | None = None
    subtotal: Decimal | None = Field(default=None, ge=0)
    tax: Decimal | None = Field(default=None, ge=0)
    shipping: Decimal | None = Field(default=None, ge=0)
    total: Decimal | None = Field(default=None, ge=0)
    in_hands_date: date | None = None
    event_date: date | None = None
    notes: str | None = None

class OrderOut(CamelModel):
    id: str
    order_number: str
    company_id: str | None = None
    contact_id: str | None = None
    assigned_user_id: str | None = None
    status: str
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    in_hands_date: date | None = None
    event_date: date | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

class OrderItemCreate(CamelModel):
    product_id: str | None = None
    quantity: int = Field(ge=1)
    unit_price: Decimal = Field(ge=0)
    total_price: Decimal | None = Field(default=None, ge=0)
    color: str | None = None
    size: str | None = None
    imprint_method: str | None = None
    notes: str | None = None

class OrderItemOut(CamelModel):
    id: str
    order_id: str
    product_id: str | None = None
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    color: str | None = None
    size: str | None = None
    imprint_method: str | None = None
    notes: str | None = None
    created_at: datetime
