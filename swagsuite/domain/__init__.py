"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  user.py           — Application users (profile only; sign-in is upstream)
  company.py        — CRM companies and contacts
  supplier.py       — Suppliers and catalog products
  order.py          — Orders / quotes and order line items
  artwork.py        — Artwork files and the kanban board (columns, cards)
  error.py          — Order error / incident tracking
  activity.py       — Activity log, order project timeline, notifications
  ss_activewear.py  — S&S Activewear catalog mirror and import jobs
  mixins.py         — Shared UUIDMixin, TimestampMixin, SoftDeleteMixin
"""

from swagsuite.domain.activity import Activity, Notification, ProjectActivity
from swagsuite.domain.artwork import ArtworkCard, ArtworkColumn, ArtworkFile
from swagsuite.domain.company import Company, Contact
from swagsuite.domain.error import ErrorRecord
from swagsuite.domain.order import Order, OrderItem
from swagsuite.domain.ss_activewear import SsActivewearImportJob, SsActivewearProduct
from swagsuite.domain.supplier import Product, Supplier
from swagsuite.domain.user import User

__all__ = [
    "Activity",
    "ArtworkCard",
    "ArtworkColumn",
    "ArtworkFile",
    "Company",
    "Contact",
    "ErrorRecord",
    "Notification",
    "Order",
    "OrderItem",
    "Product",
    "ProjectActivity",
    "SsActivewearImportJob",
    "SsActivewearProduct",
    "Supplier",
    "User",
]
