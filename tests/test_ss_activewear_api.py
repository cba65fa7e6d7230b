"""
Tests for the S&S Activewear endpoints and the catalog import job.

Import jobs are also driven directly through ``SsActivewearImportService``
so the counters can be checked without depending on background task timing.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient

from swagsuite.core.config import settings
from swagsuite.core.deps import get_ss_activewear_client
from swagsuite.main import app
from swagsuite.repositories.ss_activewear import (
    SsActivewearImportJobRepository,
    SsActivewearProductRepository,
)
from swagsuite.services import ss_activewear as import_module
from swagsuite.services.ss_activewear import SsActivewearImportService

from .conftest import ss_product

pytestmark = pytest.mark.asyncio


class TestLiveEndpoints:
    """Pass-through lookups."""

    async def test_test_connection(self, client: AsyncClient, ss_api):
        ss_api.add("/products/", [], style="00760")
        response = await client.get("/api/ss-activewear/test-connection")
        assert response.status_code == 200
        assert response.json()["data"] == {"connected": True}

    async def test_search(self, client: AsyncClient, ss_api):
        ss_api.add("/products/", [ss_product("G1", brand="Gildan")], brand="gildan")
        response = await client.get("/api/ss-activewear/search", params={"q": "gildan"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data[0]["sku"] == "G1"
        assert data[0]["brandName"] == "Gildan"
        assert data[0]["styleId"] == 760

    async def test_search_requires_query(self, client: AsyncClient):
        assert (await client.get("/api/ss-activewear/search")).status_code == 400

    async def test_product_by_sku_not_found(self, client: AsyncClient):
        response = await client.get("/api/ss-activewear/products/B99999")
        assert response.status_code == 404

    async def test_vendor_error_maps_to_502(self, client: AsyncClient, ss_api):
        ss_api.add("/categories/", {"message": "down"}, status=500)
        response = await client.get("/api/ss-activewear/categories")
        assert response.status_code == 502
        assert response.json()["error"]["code"] == "SUPPLIER_API_ERROR"

    async def test_unconfigured_integration_returns_503(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "ss_activewear_account_number", None)
        monkeypatch.setattr(settings, "ss_activewear_api_key", None)
        app.dependency_overrides.pop(get_ss_activewear_client)

        response = await client.get("/api/ss-activewear/brands")
        assert response.status_code == 503
        assert response.json()["error"]["code"] == "SERVICE_UNAVAILABLE"


class TestImportEndpoint:
    """POST /api/ss-activewear/import."""

    async def test_import_accepted_and_job_recorded(self, client: AsyncClient, ss_api):
        ss_api.add("/products/", [ss_product("B1"), ss_product("B2")], style="3001")
        response = await client.post(
            "/api/ss-activewear/import", json={"styleFilter": "3001"}, headers={"X-User-Id": "ops"}
        )
        assert response.status_code == 202
        job_id = response.json()["data"]["jobId"]

        job = (await client.get(f"/api/ss-activewear/import-jobs/{job_id}")).json()["data"]
        assert job["userId"] == "ops"
        assert job["styleFilter"] == "3001"

        jobs = await client.get("/api/ss-activewear/import-jobs")
        assert jobs.json()["meta"]["total"] == 1

    async def test_missing_job_returns_404(self, client: AsyncClient):
        assert (await client.get("/api/ss-activewear/import-jobs/nope")).status_code == 404


class TestImportService:
    """Job lifecycle and counters."""

    async def test_new_then_updated_products(self, session_factory, ss_client, ss_api, client: AsyncClient):
        ss_api.add("/products/", [ss_product("B1"), ss_product("B2", piecePrice=4.5)], style="3001")
        service = SsActivewearImportService(session_factory, ss_client)

        first = await service.create_job("ops", "3001")
        assert first.status == "pending"
        await service.run_import(first.id, "3001")

        second = await service.create_job("ops", "3001")
        await service.run_import(second.id, "3001")

        async with session_factory() as session:
            jobs = SsActivewearImportJobRepository(session)
            done_first = await jobs.get_by_id(first.id)
            done_second = await jobs.get_by_id(second.id)
            product = await SsActivewearProductRepository(session).get_by_sku("B2")

        assert done_first.status == "completed"
        assert (done_first.total_products, done_first.new_products, done_first.updated_products) == (2, 2, 0)
        assert done_second.new_products == 0
        assert done_second.updated_products == 2
        assert done_second.processed_products == 2
        assert done_second.started_at is not None
        assert done_second.completed_at is not None
        assert product.piece_price == Decimal("4.50")
        assert product.last_synced_at is not None

        catalog = await client.get("/api/ss-activewear/catalog", params={"styleId": 760})
        assert catalog.json()["meta"]["total"] == 2

    async def test_fetch_failure_marks_job_failed(self, session_factory, ss_client, ss_api):
        ss_api.add("/products/", {"message": "down"}, status=500, style="3001")
        service = SsActivewearImportService(session_factory, ss_client)
        job = await service.create_job("ops", "3001")

        await service.run_import(job.id, "3001")

        async with session_factory() as session:
            failed = await SsActivewearImportJobRepository(session).get_by_id(job.id)
        assert failed.status == "failed"
        assert "500" in failed.error_message
        assert failed.completed_at is not None

    async def test_non_json_response_marks_job_failed(self, session_factory, ss_client, ss_api):
        ss_api.add("/products/", b"<html>maintenance</html>", style="3001")
        service = SsActivewearImportService(session_factory, ss_client)
        job = await service.create_job("ops", "3001")

        await service.run_import(job.id, "3001")

        async with session_factory() as session:
            failed = await SsActivewearImportJobRepository(session).get_by_id(job.id)
        assert failed.status == "failed"
        assert failed.error_message == "S&S Activewear API returned invalid JSON"
        assert failed.completed_at is not None

    async def test_malformed_rows_count_as_errors(self, session_factory, ss_client, ss_api):
        ss_api.add(
            "/products/",
            [ss_product("B1"), {"noSku": True}, ss_product("B2")],
            style="3001",
        )
        service = SsActivewearImportService(session_factory, ss_client)
        job = await service.create_job("ops", "3001")

        await service.run_import(job.id, "3001")

        async with session_factory() as session:
            done = await SsActivewearImportJobRepository(session).get_by_id(job.id)
        assert done.status == "completed"
        assert (done.total_products, done.new_products, done.error_count) == (3, 2, 1)
        assert done.processed_products == 3

    async def test_row_failures_are_counted_not_fatal(self, session_factory, ss_client, ss_api, monkeypatch):
        ss_api.add("/products/", [ss_product(f"S{i:02d}") for i in range(12)], style="3001")
        service = SsActivewearImportService(session_factory, ss_client)
        original = import_module._catalog_values

        def flaky(product):
            if product.sku in ("S03", "S07"):
                raise ValueError("bad row")
            return original(product)

        monkeypatch.setattr(import_module, "_catalog_values", flaky)
        job = await service.create_job(None)
        await service.run_import(job.id, "3001")

        async with session_factory() as session:
            done = await SsActivewearImportJobRepository(session).get_by_id(job.id)
        assert done.status == "completed"
        assert done.error_count == 2
        assert done.new_products == 10
        assert done.new_products + done.updated_products + done.error_count == done.total_products == 12
