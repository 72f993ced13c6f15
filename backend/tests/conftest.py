from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from tutorial_api import create_app
from tutorial_api.config import BaseConfig
from tutorial_api.db.base import Base
from tutorial_api.db.models.tutorial import TutorialModel  # noqa: F401
from tutorial_api.db.session import _enable_case_sensitive_like


@pytest_asyncio.fixture
async def session(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'repo.db'}", poolclass=NullPool)
    event.listen(engine.sync_engine, "connect", _enable_case_sensitive_like)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    Session = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    async with Session() as s:
        yield s
    await engine.dispose()


@pytest.fixture
def memory_app(tmp_path):
    app = create_app(
        BaseConfig(
            DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'unused.db'}",
            TUTORIAL_REPO_BACKEND="memory",
        )
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def sql_app(tmp_path):
    app = create_app(
        BaseConfig(
            DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
            TUTORIAL_REPO_BACKEND="sqlalchemy",
            CREATE_TABLES=True,
        )
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture(params=["memory_app", "sql_app"])
def client(request):
    return request.getfixturevalue(request.param).test_client()
