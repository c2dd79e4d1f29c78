"""Root conftest: env defaults plus store, repository and app fixtures.

Invariants:
    - Every test gets a fresh fakeredis server (no state leaks between tests)
    - Settings are importable without a real .env

Design Decisions:
    - fakeredis instead of a Redis server: same client API, no external process
    - ASGITransport does not run the lifespan; the client fixture wires
      app.state by hand around the fake store
"""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("ALLOWED_ORIGIN", "http://localhost")
os.environ.setdefault("DEFAULT_URL", "https://search.example/?q=%s")

import pytest
from fakeredis import FakeServer
from fakeredis.aioredis import FakeRedis
from httpx import ASGITransport, AsyncClient

from core.dispatcher import Dispatcher
from core.registry import builtin_registry
from repository.bookmark_repository import BookmarkRepository
from repository.history_repository import HistoryRepository
from repository.store import KeyValueStore


@pytest.fixture
def redis():
    return FakeRedis(server=FakeServer())


@pytest.fixture
async def store(redis):
    s = KeyValueStore(redis)
    yield s
    await s.close()


@pytest.fixture
def bookmarks(store):
    return BookmarkRepository(store)


@pytest.fixture
def history(store):
    return HistoryRepository(store)


@pytest.fixture
def registry(bookmarks):
    return builtin_registry(bookmarks)


@pytest.fixture
def dispatcher(registry, bookmarks):
    return Dispatcher(registry, bookmarks, default_url="https://search.example/?q=%s")


@pytest.fixture
async def client(store):
    from controller.controller_dependencies import build_link_service
    from main import app

    app.state.store = store
    app.state.link_service = build_link_service(store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
