"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app's storage client is replaced on app.state for the test's duration
    - Seed fixtures insert rows directly, bypassing the request handlers

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - DatabaseSessionManager built around the test engine: services run the same
      session and error-mapping code as production
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from tinmarin.db.base import Base
from tinmarin.infrastructure.database import DatabaseSessionManager
from tinmarin.models.faq import FAQ
from tinmarin.models.recommended_website import RecommendedWebsite
from tinmarin.models.suggestion_type import SuggestionType
from tinmarin.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager(test_engine)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with the storage client swapped for the test DB."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original_manager


@pytest.fixture
async def seed_faq(test_db):
    faq = FAQ(question="How do I sign up?", answer="Use the register button.")
    test_db.add(faq)
    await test_db.commit()
    await test_db.refresh(faq)
    return faq


@pytest.fixture
async def seed_website(test_db):
    site = RecommendedWebsite(
        title="Museum", url="https://example.org", description="Local museum",
    )
    test_db.add(site)
    await test_db.commit()
    await test_db.refresh(site)
    return site


@pytest.fixture
async def seed_suggestion_type(test_db):
    suggestion_type = SuggestionType(name="Bug")
    test_db.add(suggestion_type)
    await test_db.commit()
    await test_db.refresh(suggestion_type)
    return suggestion_type


@pytest.fixture
def failing_commit(monkeypatch):
    """Make every AsyncSession.commit fail like a dropped connection."""
    from sqlalchemy.exc import OperationalError

    async def _commit(self):
        raise OperationalError("COMMIT", {}, Exception("connection lost"))

    def _install():
        monkeypatch.setattr(AsyncSession, "commit", _commit)

    return _install
