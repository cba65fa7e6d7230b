"""
Tests for artwork uploads and the kanban board.

Board tests check that card positions stay contiguous (1..n) in every
column after creates, moves and deletes.
"""

from pathlib import Path

import pytest
from httpx import AsyncClient

from swagsuite.core.config import settings
from swagsuite.repositories.artwork import ArtworkFileRepository
from swagsuite.services.artwork import ArtworkFileService

pytestmark = pytest.mark.asyncio


class TestArtworkUpload:
    """POST /api/artwork/upload validation and storage."""

    async def test_upload_png_is_stored_under_random_name(self, client: AsyncClient, tmp_path):
        response = await client.post(
            "/api/artwork/upload",
            files={"file": ("logo.png", b"\x89PNG fake image", "image/png")},
            data={"orderId": "", "companyId": ""},
        )
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        assert data["originalName"] == "logo.png"
        assert data["mimeType"] == "image/png"
        assert data["fileSize"] == len(b"\x89PNG fake image")
        assert data["fileName"] != "logo.png"
        assert len(data["fileName"]) == 32

        stored = Path(data["filePath"])
        assert stored.parent == tmp_path / "uploads"
        assert stored.read_bytes() == b"\x89PNG fake image"

    @pytest.mark.parametrize("filename", ["design.ai", "LOGO.EPS"])
    async def test_design_files_accepted_by_extension(self, client: AsyncClient, filename):
        response = await client.post(
            "/api/artwork/upload",
            files={"file": (filename, b"%!PS-Adobe", "application/octet-stream")},
        )
        assert response.status_code == 201

    async def test_unsupported_type_returns_400(self, client: AsyncClient):
        response = await client.post(
            "/api/artwork/upload",
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    async def test_empty_file_returns_400(self, client: AsyncClient):
        response = await client.post(
            "/api/artwork/upload",
            files={"file": ("empty.pdf", b"", "application/pdf")},
        )
        assert response.status_code == 400

    async def test_oversized_file_returns_413(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "max_upload_size_mb", 1)
        payload = b"0" * (1024 * 1024 + 1)
        response = await client.post(
            "/api/artwork/upload",
            files={"file": ("big.pdf", payload, "application/pdf")},
        )
        assert response.status_code == 413
        assert response.json()["error"]["code"] == "PAYLOAD_TOO_LARGE"

    async def test_failed_insert_removes_stored_file(self, session, tmp_path, monkeypatch):
        async def failing_create(self, **values):
            raise RuntimeError("insert failed")

        monkeypatch.setattr(ArtworkFileRepository, "create", failing_create)
        upload_dir = tmp_path / "orphans"
        service = ArtworkFileService(session, upload_dir, "dev-user")

        with pytest.raises(RuntimeError):
            await service.store(b"\x89PNG fake image", "logo.png", "image/png")
        assert list(upload_dir.iterdir()) == []

    async def test_list_artwork_filters_by_company(self, client: AsyncClient, make_company):
        acme = await make_company("Acme Corp")
        await client.post(
            "/api/artwork/upload",
            files={"file": ("a.png", b"a", "image/png")},
            data={"companyId": acme["id"]},
        )
        await client.post("/api/artwork/upload", files={"file": ("b.png", b"b", "image/png")})

        response = await client.get("/api/artwork", params={"companyId": acme["id"]})
        assert [f["originalName"] for f in response.json()["data"]] == ["a.png"]


async def _board(client: AsyncClient) -> list[dict]:
    response = await client.post("/api/artwork/columns/initialize")
    assert response.status_code == 200
    return response.json()["data"]


async def _card(client: AsyncClient, column_id: str, title: str) -> dict:
    response = await client.post("/api/artwork/cards", json={"title": title, "columnId": column_id})
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def _column_titles(client: AsyncClient, column_id: str) -> list[tuple[str, int]]:
    response = await client.get("/api/artwork/cards", params={"columnId": column_id})
    return [(c["title"], c["position"]) for c in response.json()["data"]]


class TestArtworkColumns:
    """Board columns."""

    async def test_initialize_creates_default_columns_once(self, client: AsyncClient):
        first = await _board(client)
        assert [c["name"] for c in first] == [
            "Pending", "In Progress", "Proof Sent", "Changes Requested", "Approved",
        ]
        assert [c["position"] for c in first] == [1, 2, 3, 4, 5]
        assert all(c["isDefault"] for c in first)

        second = await _board(client)
        assert [c["id"] for c in second] == [c["id"] for c in first]

    async def test_new_column_goes_last(self, client: AsyncClient):
        await _board(client)
        response = await client.post("/api/artwork/columns", json={"name": "Archived"})
        assert response.status_code == 201
        assert response.json()["data"]["position"] == 6

        listing = await client.get("/api/artwork/columns")
        assert listing.json()["data"][-1]["name"] == "Archived"


class TestArtworkCards:
    """Card creation, moves and deletes keep positions contiguous."""

    async def test_cards_append_to_their_column(self, client: AsyncClient):
        pending = (await _board(client))[0]
        await _card(client, pending["id"], "A")
        await _card(client, pending["id"], "B")
        assert await _column_titles(client, pending["id"]) == [("A", 1), ("B", 2)]

    async def test_card_for_unknown_column_returns_404(self, client: AsyncClient):
        response = await client.post("/api/artwork/cards", json={"title": "X", "columnId": "nope"})
        assert response.status_code == 404

    async def test_move_between_columns_renumbers_both(self, client: AsyncClient):
        columns = await _board(client)
        pending, progress = columns[0]["id"], columns[1]["id"]
        a = await _card(client, pending, "A")
        await _card(client, pending, "B")
        await _card(client, pending, "C")
        await _card(client, progress, "X")
        await _card(client, progress, "Y")

        response = await client.patch(
            f"/api/artwork/cards/{a['id']}/move", json={"columnId": progress, "position": 2}
        )
        assert response.status_code == 200
        moved = response.json()["data"]
        assert moved["columnId"] == progress
        assert moved["position"] == 2

        assert await _column_titles(client, pending) == [("B", 1), ("C", 2)]
        assert await _column_titles(client, progress) == [("X", 1), ("A", 2), ("Y", 3)]

    async def test_move_within_column(self, client: AsyncClient):
        pending = (await _board(client))[0]["id"]
        await _card(client, pending, "A")
        await _card(client, pending, "B")
        c = await _card(client, pending, "C")

        await client.patch(f"/api/artwork/cards/{c['id']}/move", json={"columnId": pending, "position": 1})
        assert await _column_titles(client, pending) == [("C", 1), ("A", 2), ("B", 3)]

    async def test_position_past_end_is_clamped(self, client: AsyncClient):
        columns = await _board(client)
        pending, progress = columns[0]["id"], columns[1]["id"]
        a = await _card(client, pending, "A")
        await _card(client, progress, "X")

        response = await client.patch(
            f"/api/artwork/cards/{a['id']}/move", json={"columnId": progress, "position": 99}
        )
        assert response.json()["data"]["position"] == 2
        assert await _column_titles(client, progress) == [("X", 1), ("A", 2)]

    async def test_move_rejects_position_zero(self, client: AsyncClient):
        pending = (await _board(client))[0]["id"]
        a = await _card(client, pending, "A")
        response = await client.patch(
            f"/api/artwork/cards/{a['id']}/move", json={"columnId": pending, "position": 0}
        )
        assert response.status_code == 422

    async def test_delete_renumbers_remaining_cards(self, client: AsyncClient):
        pending = (await _board(client))[0]["id"]
        await _card(client, pending, "A")
        b = await _card(client, pending, "B")
        await _card(client, pending, "C")

        assert (await client.delete(f"/api/artwork/cards/{b['id']}")).status_code == 204
        assert await _column_titles(client, pending) == [("A", 1), ("C", 2)]

    async def test_update_card_fields(self, client: AsyncClient):
        pending = (await _board(client))[0]["id"]
        a = await _card(client, pending, "A")
        response = await client.patch(
            f"/api/artwork/cards/{a['id']}", json={"priority": "urgent", "dueDate": "2030-01-15"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["priority"] == "urgent"
        assert data["dueDate"] == "2030-01-15"
        assert data["position"] == 1
