from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import swagsuite.domain  # noqa: F401
from swagsuite.core.deps import get_ss_activewear_client, get_upload_dir
from swagsuite.db.base import Base, get_db, get_session_factory
from swagsuite.integrations.ss_activewear import SsActivewearClient
from swagsuite.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
SS_BASE_URL = "https://ss.test/V2"


@pytest_asyncio.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False,
    )


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging data directly in the database."""
    async with session_factory() as session:
        yield session


class SsApiStub:
    """Programmable S&S Activewear backend for ``httpx.MockTransport``.

    ``responses`` maps ``(path, frozenset(params))`` to ``(status, payload)``;
    ``bytes`` payloads are sent as-is, anything else as JSON. Unmatched
    requests get a 404.
    """

    def __init__(self) -> None:
        self.responses: dict = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload, status: int = 200, **params: str) -> None:
        self.responses[(path, frozenset(params.items()))] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/V2")
        key = (path, frozenset(request.url.params.items()))
        if key not in self.responses:
            return httpx.Response(404, json={"message": "not found"})
        status, payload = self.responses[key]
        if isinstance(payload, bytes):
            return httpx.Response(status, content=payload)
        return httpx.Response(status, json=payload)


@pytest.fixture
def ss_api() -> SsApiStub:
    return SsApiStub()


@pytest_asyncio.fixture
async def ss_client(ss_api: SsApiStub) -> AsyncGenerator[SsActivewearClient, None]:
    client = SsActivewearClient(
        "12345",
        "secret",
        base_url=SS_BASE_URL,
        client=httpx.AsyncClient(transport=httpx.MockTransport(ss_api.handler)),
    )
    yield client
    await client.aclose()


def ss_product(sku: str, style_id: int = 760, brand: str = "Gildan", style: str = "Ultra Cotton T-Shirt", **extra) -> dict:
    """One product row in the vendor's wire format."""
    return {
        "sku": sku,
        "styleID": style_id,
        "brandName": brand,
        "styleName": style,
        "colorName": "Black",
        "sizeName": "L",
        "piecePrice": 3.25,
        "casePrice": 2.75,
        "qty": 120,
        **extra,
    }


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    session_factory, ss_client, tmp_path
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with the database and collaborators overridden."""

    async def get_db_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = get_db_override
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_ss_activewear_client] = lambda: ss_client
    app.dependency_overrides[get_upload_dir] = lambda: str(tmp_path / "uploads")

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_company(client: AsyncClient) -> Callable:
    async def _make(name: str = "Acme Corp", **fields) -> dict:
        response = await client.post("/api/companies", json={"name": name, **fields})
        assert response.status_code == 201
        return response.json()["data"]

    return _make


@pytest.fixture
def make_order(client: AsyncClient) -> Callable:
    async def _make(**fields) -> dict:
        response = await client.post("/api/orders", json=fields)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
