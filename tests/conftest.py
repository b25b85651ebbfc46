"""
Test infrastructure for the Board API.

Strategy
--------
- SQLite in-memory via aiosqlite removes the need for a running Postgres
  instance.  StaticPool makes every session share the single connection,
  since an in-memory SQLite database is connection-scoped.
- ``get_uow`` is overridden so every request builds its unit of work on the
  test session factory.
- Tables are created before each test and dropped after it.
- Service-level tests that take the ``uow`` fixture run twice: once against
  the SQLAlchemy unit of work and once against the in-memory fake from
  ``tests/fakes.py``.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from board.database import Base
from board.dependencies import get_uow
from board.main import app
from board.middleware import install_query_counter
from board.unit_of_work import SqlAlchemyUnitOfWork

from fakes import FakeUnitOfWork

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


def override_get_uow() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(async_session_test)


app.dependency_overrides[get_uow] = override_get_uow


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def sql_uow() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(async_session_test)


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture(params=["sqlalchemy", "memory"])
def uow(request, sql_uow, fake_uow):
    """A unit of work of each implementation, for behaviour both must share."""
    if request.param == "sqlalchemy":
        return sql_uow
    return fake_uow


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
