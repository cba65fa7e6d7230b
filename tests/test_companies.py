"""
Tests for the company and contact endpoints.

Covers CRUD, search validation, soft deletion and the activity entries
written on company changes.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestCreateCompany:
    """Company creation."""

    async def test_create_company_returns_201_and_record(self, client: AsyncClient):
        payload = {"name": "Acme Corp", "industry": "Technology", "zipCode": "10001"}
        response = await client.post("/api/companies", json=payload)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Acme Corp"
        assert data["zipCode"] == "10001"
        assert "id" in data
        assert "createdAt" in data

    async def test_create_company_accepts_snake_case(self, client: AsyncClient):
        response = await client.post("/api/companies", json={"name": "Snake Co", "zip_code": "02139"})
        assert response.status_code == 201
        assert response.json()["data"]["zipCode"] == "02139"

    async def test_create_company_requires_name(self, client: AsyncClient):
        response = await client.post("/api/companies", json={"industry": "Retail"})
        assert response.status_code == 422

    async def test_create_company_logs_activity(self, client: AsyncClient, make_company):
        company = await make_company("Logged Inc")
        response = await client.get(
            "/api/activities", params={"entityType": "company", "entityId": company["id"]}
        )
        assert response.status_code == 200
        actions = [a["action"] for a in response.json()["data"]]
        assert actions == ["created"]


class TestReadCompanies:
    """Listing, fetching and searching companies."""

    async def test_list_companies_is_paginated(self, client: AsyncClient, make_company):
        for i in range(3):
            await make_company(f"Company {i}")
        response = await client.get("/api/companies", params={"limit": 2})
        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 2
        assert body["meta"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}

    async def test_list_companies_sorts_by_requested_column(self, client: AsyncClient, make_company):
        for name in ("Bravo", "Alpha", "Charlie"):
            await make_company(name)
        response = await client.get("/api/companies", params={"sort": "name", "order": "asc"})
        assert response.status_code == 200
        assert [c["name"] for c in response.json()["data"]] == ["Alpha", "Bravo", "Charlie"]

    @pytest.mark.parametrize("sort", ["metadata", "registry", "__table__", "noSuchField"])
    async def test_list_companies_rejects_unknown_sort_field(self, client: AsyncClient, sort):
        response = await client.get("/api/companies", params={"sort": sort})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    async def test_get_missing_company_returns_404(self, client: AsyncClient):
        response = await client.get("/api/companies/does-not-exist")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_search_is_case_insensitive(self, client: AsyncClient, make_company):
        await make_company("Acme Corp", industry="Technology")
        await make_company("Globex", email="sales@globex.com")
        response = await client.get("/api/companies/search", params={"q": "ACME"})
        assert response.status_code == 200
        names = [c["name"] for c in response.json()["data"]]
        assert names == ["Acme Corp"]

        response = await client.get("/api/companies/search", params={"q": "technology"})
        assert [c["name"] for c in response.json()["data"]] == ["Acme Corp"]

    async def test_search_matches_email(self, client: AsyncClient, make_company):
        await make_company("Globex", email="sales@globex.com")
        response = await client.get("/api/companies/search", params={"q": "globex.com"})
        assert [c["name"] for c in response.json()["data"]] == ["Globex"]

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    async def test_search_without_query_returns_400(self, client: AsyncClient, params):
        response = await client.get("/api/companies/search", params=params)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"


class TestUpdateDeleteCompany:
    """Partial update and soft delete."""

    async def test_patch_updates_only_given_fields(self, client: AsyncClient, make_company):
        company = await make_company("Acme Corp", industry="Technology")
        response = await client.patch(f"/api/companies/{company['id']}", json={"phone": "555-0100"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["phone"] == "555-0100"
        assert data["industry"] == "Technology"

    async def test_patch_missing_company_returns_404(self, client: AsyncClient):
        response = await client.patch("/api/companies/nope", json={"phone": "1"})
        assert response.status_code == 404

    async def test_delete_company_then_get_returns_404(self, client: AsyncClient, make_company):
        company = await make_company("Doomed LLC")
        response = await client.delete(f"/api/companies/{company['id']}")
        assert response.status_code == 204

        assert (await client.get(f"/api/companies/{company['id']}")).status_code == 404
        listing = await client.get("/api/companies")
        assert listing.json()["meta"]["total"] == 0

    async def test_delete_missing_company_returns_404(self, client: AsyncClient):
        response = await client.delete("/api/companies/nope")
        assert response.status_code == 404


class TestContacts:
    """Contacts belong to companies."""

    async def test_create_and_filter_contacts_by_company(self, client: AsyncClient, make_company):
        acme = await make_company("Acme Corp")
        globex = await make_company("Globex")
        for company, first in ((acme, "Ann"), (acme, "Bob"), (globex, "Cy")):
            response = await client.post(
                "/api/contacts",
                json={"companyId": company["id"], "firstName": first, "lastName": "Smith"},
            )
            assert response.status_code == 201

        response = await client.get("/api/contacts", params={"companyId": acme["id"]})
        assert response.status_code == 200
        names = sorted(c["firstName"] for c in response.json()["data"])
        assert names == ["Ann", "Bob"]

    async def test_create_contact_for_unknown_company_returns_404(self, client: AsyncClient):
        response = await client.post(
            "/api/contacts",
            json={"companyId": "missing", "firstName": "Ann", "lastName": "Smith"},
        )
        assert response.status_code == 404

    async def test_update_and_delete_contact(self, client: AsyncClient, make_company):
        acme = await make_company("Acme Corp")
        created = await client.post(
            "/api/contacts",
            json={"companyId": acme["id"], "firstName": "Ann", "lastName": "Smith"},
        )
        contact_id = created.json()["data"]["id"]

        response = await client.patch(f"/api/contacts/{contact_id}", json={"isPrimary": True})
        assert response.status_code == 200
        assert response.json()["data"]["isPrimary"] is True

        assert (await client.delete(f"/api/contacts/{contact_id}")).status_code == 204
        assert (await client.get(f"/api/contacts/{contact_id}")).status_code == 404
