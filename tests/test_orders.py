"""
Tests for orders and order line items.

Covers defaults applied on creation, combined list filters, the activity
and project timeline entries written on updates, and line item totals.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestCreateOrder:
    """Order creation defaults."""

    async def test_order_number_and_assignee_default(self, client: AsyncClient):
        response = await client.post(
            "/api/orders", json={"total": "120.00"}, headers={"X-User-Id": "rep-7"}
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["orderNumber"].startswith("ORD-")
        assert data["assignedUserId"] == "rep-7"
        assert data["status"] == "quote"
        assert Decimal(data["total"]) == Decimal("120")

    async def test_assignee_falls_back_to_default_user(self, client: AsyncClient, make_order):
        order = await make_order()
        assert order["assignedUserId"] == "dev-user"

    async def test_duplicate_order_number_returns_409(self, client: AsyncClient, make_order):
        await make_order(orderNumber="ORD-1")
        response = await client.post("/api/orders", json={"orderNumber": "ORD-1"})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    async def test_invalid_status_is_rejected(self, client: AsyncClient):
        response = await client.post("/api/orders", json={"status": "lost"})
        assert response.status_code == 422

    async def test_create_logs_activity(self, client: AsyncClient, make_order):
        order = await make_order(orderNumber="ORD-LOG")
        response = await client.get(
            "/api/activities", params={"entityType": "order", "entityId": order["id"]}
        )
        assert [a["action"] for a in response.json()["data"]] == ["created"]


class TestListOrders:
    """Filters combine."""

    async def test_status_and_company_filters_combine(self, client: AsyncClient, make_company, make_order):
        acme = await make_company("Acme Corp")
        globex = await make_company("Globex")
        await make_order(orderNumber="A-1", companyId=acme["id"], status="approved")
        await make_order(orderNumber="A-2", companyId=acme["id"], status="quote")
        await make_order(orderNumber="G-1", companyId=globex["id"], status="approved")

        response = await client.get(
            "/api/orders", params={"status": "approved", "companyId": acme["id"]}
        )
        assert response.status_code == 200
        assert [o["orderNumber"] for o in response.json()["data"]] == ["A-1"]

        response = await client.get("/api/orders", params={"status": "approved"})
        assert response.json()["meta"]["total"] == 2

    async def test_get_missing_order_returns_404(self, client: AsyncClient):
        assert (await client.get("/api/orders/missing")).status_code == 404


class TestUpdateOrder:
    """PATCH writes an activity and, on status change, a timeline entry."""

    async def test_status_change_records_timeline_entry(self, client: AsyncClient, make_order):
        order = await make_order(orderNumber="ORD-S")
        response = await client.patch(f"/api/orders/{order['id']}", json={"status": "approved"})
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "approved"

        timeline = await client.get(f"/api/projects/{order['id']}/activities")
        entries = timeline.json()["data"]
        assert len(entries) == 1
        assert entries[0]["activityType"] == "status_change"
        assert entries[0]["isSystemGenerated"] is True
        assert entries[0]["metadata"] == {"oldStatus": "quote", "newStatus": "approved"}

        activities = await client.get(
            "/api/activities", params={"entityType": "order", "entityId": order["id"]}
        )
        assert [a["action"] for a in activities.json()["data"]] == ["updated", "created"]

    async def test_update_without_status_change_adds_no_timeline_entry(self, client: AsyncClient, make_order):
        order = await make_order()
        response = await client.patch(f"/api/orders/{order['id']}", json={"notes": "Rush"})
        assert response.json()["data"]["notes"] == "Rush"

        timeline = await client.get(f"/api/projects/{order['id']}/activities")
        assert timeline.json()["data"] == []


class TestOrderItems:
    """Line items."""

    async def test_total_price_defaults_to_quantity_times_unit_price(self, client: AsyncClient, make_order):
        order = await make_order()
        response = await client.post(
            f"/api/orders/{order['id']}/items", json={"quantity": 3, "unitPrice": "2.50"}
        )
        assert response.status_code == 201
        assert Decimal(response.json()["data"]["totalPrice"]) == Decimal("7.50")

    async def test_explicit_total_price_is_kept(self, client: AsyncClient, make_order):
        order = await make_order()
        response = await client.post(
            f"/api/orders/{order['id']}/items",
            json={"quantity": 3, "unitPrice": "2.50", "totalPrice": "7.00"},
        )
        assert Decimal(response.json()["data"]["totalPrice"]) == Decimal("7.00")

    async def test_items_listed_in_creation_order(self, client: AsyncClient, make_order):
        order = await make_order()
        for size in ("S", "M", "L"):
            await client.post(
                f"/api/orders/{order['id']}/items",
                json={"quantity": 1, "unitPrice": "1", "size": size},
            )
        response = await client.get(f"/api/orders/{order['id']}/items")
        assert [i["size"] for i in response.json()["data"]] == ["S", "M", "L"]

    async def test_item_for_missing_order_returns_404(self, client: AsyncClient):
        response = await client.post("/api/orders/missing/items", json={"quantity": 1, "unitPrice": "1"})
        assert response.status_code == 404
