"""Shared FastAPI dependencies: acting user and external collaborators.

Tests override these through ``app.dependency_overrides``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Header

from swagsuite.core.config import settings
from swagsuite.core.exceptions import ServiceUnavailableError
from swagsuite.integrations.ss_activewear import SsActivewearClient

logger = logging.getLogger(__name__)


def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> str:
    """Acting user. Authentication happens upstream and forwards the id."""
    return x_user_id or settings.default_user_id


def get_upload_dir() -> str:
    return settings.upload_dir


@lru_cache(maxsize=1)
def _ss_activewear_client() -> SsActivewearClient:
    logger.info("Creating S&S Activewear client for %s", settings.ss_activewear_base_url)
    return SsActivewearClient(
        settings.ss_activewear_account_number or "",
        settings.ss_activewear_api_key or "",
        base_url=settings.ss_activewear_base_url,
        timeout=settings.ss_activewear_timeout,
    )


def get_ss_activewear_client() -> SsActivewearClient:
    """Process-wide S&S client; 503 when credentials are not configured."""
    if not settings.ss_activewear_enabled:
        raise ServiceUnavailableError(
            "S&S Activewear integration is not configured. "
            "Set SS_ACTIVEWEAR_ACCOUNT_NUMBER and SS_ACTIVEWEAR_API_KEY."
        )
    return _ss_activewear_client()


async def close_ss_activewear_client() -> None:
    """Close the shared client if one was created (application shutdown)."""
    if _ss_activewear_client.cache_info().currsize:
        await _ss_activewear_client().aclose()
        _ss_activewear_client.cache_clear()
