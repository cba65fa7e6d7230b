"""Pydantic schemas package.

Folder intent:
  common.py         — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  company.py        — Companies and contacts
  supplier.py       — Suppliers and products
  order.py          — Orders and order items
  artwork.py        — Artwork files, board columns and cards
  error.py          — Error tracking records and statistics
  activity.py       — Activity log, project timeline, notifications
  ss_activewear.py  — S&S Activewear wire model, catalog mirror, import jobs
  user.py           — Current user profile
  dashboard.py      — Dashboard stats, universal search, AI reports
"""
