"""Third-party HTTP integrations (no FastAPI, no SQLAlchemy)."""
