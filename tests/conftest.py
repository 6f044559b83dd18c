"""Pytest configuration and fixtures."""
from types import SimpleNamespace

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.pool import StaticPool

from apartment.config import settings
from apartment.database import build_engine, get_session
from apartment.main import app
from apartment.models import Base, InteriorPattern, InteriorType, Room

ALIAS = "abc123"
LOGIN = "xyz789"
ADMIN_LOGIN = "admin-login-token"
TAKEN_ALIAS = "taken-alias"
TAKEN_LOGIN = "taken-login"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    eng = build_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
async def seed(session_factory):
    """Default catalog, a second sofa pattern, an admin room and two guest rooms."""
    async with session_factory() as s:
        types = {}
        patterns = {}
        for code in settings.default_interior_slots:
            itype = InteriorType(code=code, name=code.title())
            s.add(itype)
            await s.flush()
            pattern = InteriorPattern(type_id=itype.id, pattern_number=1, name="Default")
            s.add(pattern)
            await s.flush()
            types[code] = itype.id
            patterns[code] = pattern.id

        sofa_two = InteriorPattern(type_id=types["sofa"], pattern_number=2, name="Leather")
        s.add(sofa_two)

        s.add_all(
            [
                Room(room_number="0000", room_alias_id="admin-alias", login_id=ADMIN_LOGIN, is_occupied=True),
                Room(room_number="0007", room_alias_id=ALIAS, login_id=LOGIN, is_occupied=False),
                Room(room_number="0008", room_alias_id=TAKEN_ALIAS, login_id=TAKEN_LOGIN, is_occupied=True),
            ]
        )
        await s.commit()

        return SimpleNamespace(types=types, patterns=patterns, sofa_leather=sofa_two.id)


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app, with sessions bound to the test database."""

    async def override_session():
        async with session_factory() as s:
            try:
                yield s
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[get_session] = override_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def claimed(client, seed):
    """Room 0007 after a successful claim."""
    resp = await client.get(f"/api/rooms/{ALIAS}/claim")
    assert resp.status_code == 200
    return seed
