"""Services package — all business logic lives here, never in routers.

Files:
  company.py, supplier.py, order.py  — CRM, catalog and order workflows (log activities)
  artwork.py          — artwork uploads and the kanban board (card ordering)
  error.py            — order error tracking and statistics
  activity.py         — activity log, project timeline, notifications
  search.py           — universal search
  dashboard.py        — dashboard figures from the database
  reports.py          — report suggestions and OpenAI-written summaries
  mock_integrations.py — fixed payloads for HubSpot, Slack and news feeds
  ss_activewear.py    — S&S catalog import jobs and the mirrored catalog

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
