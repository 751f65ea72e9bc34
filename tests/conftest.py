import asyncio
import os

# Settings are read on first import of the app; keep tests off the real store.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import Entry  # noqa: F401 - register the table


def make_session_maker(engine, session_class=AsyncSession):
    return async_sessionmaker(engine, class_=session_class, expire_on_commit=False, autoflush=False)


def override_for(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return override_get_db


@pytest.fixture
def engine(tmp_path):
    # NullPool: every session opens its own connection on the running loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    async def init():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(init())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_maker(engine):
    return make_session_maker(engine)


@pytest.fixture
def override_db(engine):
    """Point get_db at sessions of the given class, e.g. one whose commit fails."""

    def _override(session_class=AsyncSession):
        app.dependency_overrides[get_db] = override_for(make_session_maker(engine, session_class))

    return _override


@pytest.fixture
def client(override_db):
    override_db()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
