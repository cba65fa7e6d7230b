"""Tests for order error tracking and its statistics."""

from decimal import Decimal

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _report(client: AsyncClient, **fields) -> dict:
    payload = {"errorType": "printing", "responsibleParty": "vendor", "costToLsd": "0", **fields}
    response = await client.post("/api/errors", json=payload, headers={"X-User-Id": "qa-1"})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateError:
    """Error creation."""

    async def test_created_by_is_current_user(self, client: AsyncClient):
        record = await _report(client, clientName="Acme Corp", date="2030-03-01")
        assert record["createdBy"] == "qa-1"
        assert record["isResolved"] is False
        assert record["date"] == "2030-03-01"

    async def test_unknown_error_type_is_rejected(self, client: AsyncClient):
        response = await client.post("/api/errors", json={"errorType": "gremlins"})
        assert response.status_code == 422


class TestListErrors:
    """Filters on the error list."""

    async def test_filters(self, client: AsyncClient):
        await _report(client, errorType="pricing", responsibleParty="customer")
        await _report(client, errorType="shipping", responsibleParty="vendor")
        resolved = await _report(client, errorType="shipping", responsibleParty="lsd")
        await client.post(f"/api/errors/{resolved['id']}/resolve")

        by_type = await client.get("/api/errors", params={"errorType": "shipping"})
        assert by_type.json()["meta"]["total"] == 2

        unresolved = await client.get(
            "/api/errors", params={"errorType": "shipping", "isResolved": "false"}
        )
        assert [e["responsibleParty"] for e in unresolved.json()["data"]] == ["vendor"]

        by_party = await client.get("/api/errors", params={"responsibleParty": "customer"})
        assert [e["errorType"] for e in by_party.json()["data"]] == ["pricing"]


class TestResolveAndUpdate:
    """Resolution bookkeeping."""

    async def test_resolve_sets_resolver_and_timestamp(self, client: AsyncClient):
        record = await _report(client)
        response = await client.post(
            f"/api/errors/{record['id']}/resolve", headers={"X-User-Id": "manager-2"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["isResolved"] is True
        assert data["resolvedBy"] == "manager-2"
        assert data["resolvedAt"] is not None

    async def test_resolve_missing_error_returns_404(self, client: AsyncClient):
        assert (await client.post("/api/errors/missing/resolve")).status_code == 404

    async def test_put_updates_fields(self, client: AsyncClient):
        record = await _report(client)
        response = await client.put(
            f"/api/errors/{record['id']}",
            json={"resolution": "reprint", "additionalNotes": "Reprinted at vendor cost"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["resolution"] == "reprint"
        assert data["additionalNotes"] == "Reprinted at vendor cost"
        assert data["errorType"] == "printing"

    async def test_put_reopen_clears_resolution(self, client: AsyncClient):
        record = await _report(client)
        await client.post(f"/api/errors/{record['id']}/resolve")
        response = await client.put(f"/api/errors/{record['id']}", json={"isResolved": False})
        data = response.json()["data"]
        assert data["isResolved"] is False
        assert data["resolvedAt"] is None
        assert data["resolvedBy"] is None


class TestErrorStatistics:
    """Counts and sums match the stored records."""

    async def test_statistics(self, client: AsyncClient):
        await _report(client, errorType="pricing", responsibleParty="lsd", costToLsd="100.50")
        await _report(client, errorType="pricing", responsibleParty="vendor", costToLsd="25.25")
        shipped = await _report(client, errorType="shipping", responsibleParty="lsd")
        await client.post(f"/api/errors/{shipped['id']}/resolve")

        response = await client.get("/api/errors/statistics")
        assert response.status_code == 200
        stats = response.json()["data"]
        assert stats["totalErrors"] == 3
        assert stats["resolvedErrors"] == 1
        assert stats["unresolvedErrors"] == 2
        assert Decimal(stats["costToLsd"]) == Decimal("125.75")
        assert stats["errorsByType"] == {"pricing": 2, "shipping": 1}
        assert stats["errorsByResponsibleParty"] == {"lsd": 2, "vendor": 1}

    async def test_statistics_on_empty_table(self, client: AsyncClient):
        stats = (await client.get("/api/errors/statistics")).json()["data"]
        assert stats["totalErrors"] == 0
        assert Decimal(stats["costToLsd"]) == Decimal("0")
        assert stats["errorsByType"] == {}
