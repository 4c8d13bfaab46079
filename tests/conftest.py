"""Pytest configuration and fixtures for linkresolver.

Unit tests build LinkResolver from AsyncMock stores; integration tests use
an in-memory SQLite database (aiosqlite); API tests drive
linkresolver.main:create_app() over ASGITransport.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from linkresolver.application.services import (
    DisplayNameResolver,
    LinkResolver,
    LinkUrlResolver,
)
from linkresolver.core.config import get_settings
from linkresolver.infrastructure.cache import InMemoryCacheStore
from linkresolver.infrastructure.persistence.database import Base
from linkresolver.infrastructure.routing import RouteTable, VirtualPathExpander

# Importing the models registers their tables on Base.metadata.
import linkresolver.infrastructure.persistence.models  # noqa: F401


class FixedLanguageProvider:
    """Working-language provider returning a fixed id."""

    def __init__(self, language_id: int = 1) -> None:
        self.language_id = language_id

    def current_language_id(self) -> int:
        return self.language_id


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Clear the settings cache around each test; run outside any developer .env."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def entity_store() -> AsyncMock:
    store = AsyncMock()
    store.get_field = AsyncMock(return_value="")
    return store


@pytest.fixture
def localization_store() -> AsyncMock:
    store = AsyncMock()
    store.get_localized_value = AsyncMock(return_value="")
    return store


@pytest.fixture
def slug_store() -> AsyncMock:
    store = AsyncMock()
    store.get_active_slug = AsyncMock(return_value="")
    return store


@pytest.fixture
def media_url_service() -> AsyncMock:
    service = AsyncMock()
    service.get_url = AsyncMock(return_value="")
    return service


@pytest.fixture
def path_expander() -> VirtualPathExpander:
    return VirtualPathExpander("/")


@pytest.fixture
def router() -> RouteTable:
    return RouteTable(
        {
            "Product": "{se_name}",
            "Category": "{se_name}",
            "Manufacturer": "{se_name}",
            "Topic": "t/{se_name}",
        },
        "/",
    )


@pytest.fixture
def display_names(entity_store, localization_store, path_expander) -> DisplayNameResolver:
    return DisplayNameResolver(entity_store, localization_store, path_expander)


@pytest.fixture
def links(slug_store, media_url_service, router, path_expander) -> LinkUrlResolver:
    return LinkUrlResolver(slug_store, media_url_service, router, path_expander)


@pytest.fixture
def cache() -> InMemoryCacheStore:
    return InMemoryCacheStore(ttl=None)


@pytest.fixture
def language_provider() -> FixedLanguageProvider:
    return FixedLanguageProvider(1)


@pytest.fixture
def resolver(display_names, links, cache, language_provider) -> LinkResolver:
    """LinkResolver over mocked stores, in-memory cache and working language 1."""
    return LinkResolver(display_names, links, cache, language_provider)


@pytest.fixture
def mock_redis() -> MagicMock:
    """Redis client mock: async commands, scan_iter as an async generator."""
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    client.unlink = AsyncMock(return_value=0)
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    client.keys_for_scan = []

    async def scan_iter(match: str | None = None):
        for key in client.keys_for_scan:
            yield key

    client.scan_iter = scan_iter
    return client


@pytest.fixture
async def db_session() -> AsyncSession:
    """Session on a fresh in-memory SQLite database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def app() -> FastAPI:
    """Fresh app per test (lifespan not run; the cache dependency creates one)."""
    from linkresolver.main import create_app

    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
