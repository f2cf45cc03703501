"""Shared pytest fixtures for the Inception test suite.

Provides:
- db_engine: in-memory SQLite async engine with all tables
- db_session: SAVEPOINT-isolated async session (app commits don't leak)
- settings / reference_cache: per-test settings and a fresh cache
- client: AsyncClient with security disabled and dependency overrides
- secured_client: same, with bearer-token security enabled
- bearer: helper that builds an Authorization header for a principal
"""

from collections.abc import Callable
from contextlib import asynccontextmanager
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from inception.api.dependencies import get_reference_cache
from inception.config.settings import Settings, get_settings
from inception.core.cache import ReferenceCache
from inception.db.session import Base, get_async_session
from inception.security.tokens import issue_token
import inception.db.tables  # noqa: F401  registers the ORM tables on Base.metadata

TEST_JWT_SECRET = "test-secret"
TENANT_A = UUID("00000000-0000-0000-0000-00000000000a")
TENANT_B = UUID("00000000-0000-0000-0000-00000000000b")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine with all tables."""
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Provide a SAVEPOINT-isolated session.

    The outer transaction is never committed and rolls back at teardown.
    Application code calling session.commit() releases the SAVEPOINT, which is
    then restarted so later operations stay in the same outer transaction.
    """
    async with db_engine.connect() as conn:
        trans = await conn.begin()
        session = AsyncSession(bind=conn, expire_on_commit=False)

        nested = await conn.begin_nested()

        @event.listens_for(session.sync_session, "after_transaction_end")
        def restart_savepoint(sync_session, transaction):  # noqa: ARG001
            nonlocal nested
            if transaction.nested and not transaction._parent.nested:
                nested = conn.sync_connection.begin_nested()

        yield session

        await session.close()
        await trans.rollback()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, SECURITY_DISABLED=True, JWT_SECRET=TEST_JWT_SECRET)


@pytest.fixture
def reference_cache() -> ReferenceCache:
    return ReferenceCache(ttl_seconds=60, max_entries=256)


@asynccontextmanager
async def _client_for(db_session: AsyncSession, settings: Settings, cache: ReferenceCache):
    from inception.api.main import app

    async def _override_session():
        yield db_session

    app.dependency_overrides[get_async_session] = _override_session
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_reference_cache] = lambda: cache

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def client(db_session, settings, reference_cache):
    """AsyncClient with security disabled and the test session, settings and cache."""
    async with _client_for(db_session, settings, reference_cache) as ac:
        yield ac


@pytest.fixture
async def secured_client(db_session, reference_cache):
    """AsyncClient that requires a valid bearer token."""
    secured = Settings(_env_file=None, SECURITY_DISABLED=False, JWT_SECRET=TEST_JWT_SECRET)
    async with _client_for(db_session, secured, reference_cache) as ac:
        yield ac


@pytest.fixture
def bearer() -> Callable[..., dict[str, str]]:
    """Build an Authorization header for a principal with the given grants."""
    token_settings = Settings(_env_file=None, JWT_SECRET=TEST_JWT_SECRET)

    def _bearer(name: str = "tester", *, roles: list[str] | None = None,
                functions: list[str] | None = None,
                tenants: list[UUID] | None = None) -> dict[str, str]:
        token = issue_token(
            token_settings, name=name, roles=roles, functions=functions, tenants=tenants,
        )
        return {"Authorization": f"Bearer {token}"}

    return _bearer
