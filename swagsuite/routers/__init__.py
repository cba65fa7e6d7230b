"""Routers package — HTTP endpoint definitions, all under /api.

Files:
  auth.py           — current user
  companies.py      — companies and contacts
  catalog.py        — suppliers and products
  orders.py         — orders and line items
  artwork.py        — artwork uploads and the kanban board
  errors.py         — order error tracking
  activities.py     — activity log, project timeline, notifications
  search.py         — universal search
  dashboard.py      — dashboard, mocked integrations, reports
  ss_activewear.py  — S&S Activewear lookups and catalog imports

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to swagsuite/services/.
"""
