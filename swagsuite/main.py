"""SwagSuite API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swagsuite.core.config import settings
from swagsuite.core.deps import close_ss_activewear_client
from swagsuite.core.exceptions import register_exception_handlers
from swagsuite.db.base import create_tables
from swagsuite.middleware.request_log import RequestLogMiddleware
from swagsuite.schemas.common import HealthResponse

from swagsuite.routers.activities import notifications_router, projects_router
from swagsuite.routers.activities import router as activities_router
from swagsuite.routers.artwork import router as artwork_router
from swagsuite.routers.auth import router as auth_router
from swagsuite.routers.catalog import products_router, suppliers_router
from swagsuite.routers.companies import contacts_router
from swagsuite.routers.companies import router as companies_router
from swagsuite.routers.dashboard import integrations_router, reports_router
from swagsuite.routers.dashboard import router as dashboard_router
from swagsuite.routers.errors import router as errors_router
from swagsuite.routers.orders import router as orders_router
from swagsuite.routers.search import router as search_router
from swagsuite.routers.ss_activewear import router as ss_activewear_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        await create_tables()
        logger.info("Database tables ensured")
    yield
    await close_ss_activewear_client()


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=lifespan,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes (/api/*) ---
    for router in (
        auth_router,
        companies_router,
        contacts_router,
        suppliers_router,
        products_router,
        orders_router,
        artwork_router,
        errors_router,
        activities_router,
        projects_router,
        notifications_router,
        search_router,
        dashboard_router,
        integrations_router,
        reports_router,
        ss_activewear_router,
    ):
        app.include_router(router)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
