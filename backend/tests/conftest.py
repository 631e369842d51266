"""Root conftest for all tests.

API tests run against an in-memory SQLite database shared through a StaticPool,
created fresh for every test.
"""

import os

# Must be set before sprint_capacity.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import sprint_capacity.models  # noqa: F401  registers tables on Base.metadata
from sprint_capacity.database import Base, get_db
from sprint_capacity.main import app
from sprint_capacity.schemas.absence import AbsenceCreate
from sprint_capacity.schemas.sprint import SprintInput
from sprint_capacity.schemas.team import TeamMemberInput
from sprint_capacity.services.settings_service import seed_default_settings

# Two full Mon-Fri weeks; Whit Monday 2025-06-09 falls inside
SPRINT_START = date(2025, 6, 2)
SPRINT_END = date(2025, 6, 13)


@pytest.fixture
def sprint():
    return SprintInput(id=1, name="Sprint 23", start_date=SPRINT_START, end_date=SPRINT_END, unit="hours")


@pytest.fixture
def member():
    return TeamMemberInput(id=1, name="Anna", role="Developer", capacity_per_day=8, focus_factor=1.0)


@pytest.fixture
def make_absence():
    def _make(member_id: int, start: date, end: date, type: str = "vacation") -> AbsenceCreate:
        return AbsenceCreate(member_id=member_id, start_date=start, end_date=end, type=type)

    return _make


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(db_engine):
    maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as db:
        await seed_default_settings(db)
        await db.commit()
    return maker


@pytest_asyncio.fixture
async def client(session_maker):
    async def _get_test_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
