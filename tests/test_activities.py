"""Tests for the project timeline, mentions and notifications."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestProjectTimeline:
    """Comments on an order's timeline."""

    async def test_post_comment_and_list_newest_first(self, client: AsyncClient, make_order):
        order = await make_order()
        for text in ("first", "second"):
            response = await client.post(
                f"/api/projects/{order['id']}/activities", json={"content": text}
            )
            assert response.status_code == 201

        response = await client.get(f"/api/projects/{order['id']}/activities")
        entries = response.json()["data"]
        assert [e["content"] for e in entries] == ["second", "first"]
        assert entries[0]["activityType"] == "comment"
        assert entries[0]["userId"] == "dev-user"
        assert entries[0]["isSystemGenerated"] is False

    async def test_timeline_for_missing_order_returns_404(self, client: AsyncClient):
        assert (await client.get("/api/projects/missing/activities")).status_code == 404
        response = await client.post("/api/projects/missing/activities", json={"content": "hi"})
        assert response.status_code == 404

    async def test_empty_content_is_rejected(self, client: AsyncClient, make_order):
        order = await make_order()
        response = await client.post(f"/api/projects/{order['id']}/activities", json={"content": ""})
        assert response.status_code == 422


class TestMentions:
    """Mentions fan out into notifications for everyone but the author."""

    async def test_mentioned_users_are_notified(self, client: AsyncClient, make_order):
        order = await make_order(orderNumber="ORD-77")
        response = await client.post(
            f"/api/projects/{order['id']}/activities",
            json={
                "content": "@sam @lee please review the proof",
                "mentionedUsers": ["sam", "lee", "sam", "author"],
            },
            headers={"X-User-Id": "author"},
        )
        assert response.status_code == 201
        assert response.json()["data"]["mentionedUsers"] == ["sam", "lee", "author"]

        sam = await client.get("/api/notifications", headers={"X-User-Id": "sam"})
        notifications = sam.json()["data"]
        assert len(notifications) == 1
        assert notifications[0]["type"] == "mention"
        assert notifications[0]["senderId"] == "author"
        assert notifications[0]["orderId"] == order["id"]
        assert "ORD-77" in notifications[0]["title"]

        author = await client.get("/api/notifications", headers={"X-User-Id": "author"})
        assert author.json()["data"] == []


class TestNotifications:
    """Read state."""

    async def _notify(self, client: AsyncClient, order_id: str, recipient: str, times: int = 1):
        for i in range(times):
            await client.post(
                f"/api/projects/{order_id}/activities",
                json={"content": f"ping {i}", "mentionedUsers": [recipient]},
            )

    async def test_mark_one_read_and_unread_filter(self, client: AsyncClient, make_order):
        order = await make_order()
        await self._notify(client, order["id"], "sam", times=2)
        headers = {"X-User-Id": "sam"}

        notifications = (await client.get("/api/notifications", headers=headers)).json()["data"]
        response = await client.patch(
            f"/api/notifications/{notifications[0]['id']}/read", headers=headers
        )
        assert response.status_code == 200
        assert response.json()["data"]["isRead"] is True

        unread = await client.get("/api/notifications", params={"unreadOnly": "true"}, headers=headers)
        assert len(unread.json()["data"]) == 1

    async def test_cannot_mark_someone_elses_notification(self, client: AsyncClient, make_order):
        order = await make_order()
        await self._notify(client, order["id"], "sam")
        notification = (
            await client.get("/api/notifications", headers={"X-User-Id": "sam"})
        ).json()["data"][0]

        response = await client.patch(
            f"/api/notifications/{notification['id']}/read", headers={"X-User-Id": "lee"}
        )
        assert response.status_code == 404

    async def test_mark_all_read(self, client: AsyncClient, make_order):
        order = await make_order()
        await self._notify(client, order["id"], "sam", times=3)
        await self._notify(client, order["id"], "lee")
        headers = {"X-User-Id": "sam"}

        response = await client.patch("/api/notifications/read-all", headers=headers)
        assert response.status_code == 200
        assert response.json()["data"]["updated"] == 3

        unread = await client.get("/api/notifications", params={"unreadOnly": "true"}, headers=headers)
        assert unread.json()["data"] == []
        lee = await client.get("/api/notifications", params={"unreadOnly": "true"}, headers={"X-User-Id": "lee"})
        assert len(lee.json()["data"]) == 1
