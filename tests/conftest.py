import asyncio
import re
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dagstore.api.main import app, get_pool


_INSERT_RE = re.compile(r"INSERT INTO (\w+) \(([^)]*)\)", re.IGNORECASE)
_SELECT_RE = re.compile(r"SELECT (.+) FROM (\w+)", re.IGNORECASE)


class FakeConnection:
    """In-memory stand-in for an asyncpg connection (single-table INSERT/SELECT only)"""

    def __init__(self, tables):
        self.tables = tables
        self.statements = []

    async def execute(self, query, *args):
        self.statements.append((query, args))
        # Yield so concurrent requests interleave like real I/O
        await asyncio.sleep(0)
        match = _INSERT_RE.search(query)
        table = match.group(1)
        columns = [c.strip() for c in match.group(2).split(",")]
        self.tables.setdefault(table, []).append(dict(zip(columns, args)))
        return "INSERT 0 1"

    async def fetch(self, query, *args):
        self.statements.append((query, args))
        await asyncio.sleep(0)
        match = _SELECT_RE.search(query)
        columns = [c.strip() for c in match.group(1).split(",")]
        table = match.group(2)
        return [{c: row[c] for c in columns} for row in self.tables.get(table, [])]


class FakePool:
    def __init__(self):
        self.tables = {}
        self.conn = FakeConnection(self.tables)
        self.acquired = 0

    @property
    def is_connected(self):
        return True

    @property
    def statements(self):
        return self.conn.statements

    @asynccontextmanager
    async def acquire(self):
        self.acquired += 1
        yield self.conn

    async def close(self):
        """No-op close for test isolation."""
        pass


class FailingPool:
    """Pool whose every checkout fails with the given exception"""

    def __init__(self, exc):
        self.exc = exc

    @property
    def is_connected(self):
        return True

    @asynccontextmanager
    async def acquire(self):
        raise self.exc
        yield  # pragma: no cover


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest_asyncio.fixture
async def make_client():
    """Build an HTTP client against the app with the given pool injected."""
    clients = []

    async def _make(pool):
        app.dependency_overrides[get_pool] = lambda: pool
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(make_client, fake_pool):
    return await make_client(fake_pool)


@pytest.fixture
def failing_pool():
    """Factory for pools whose checkout raises the given exception."""
    return FailingPool
