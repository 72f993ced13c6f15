"""Async SQLAlchemy engine/session initialization and lifecycle management."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from flask import Flask, current_app
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from .base import Base

logger = logging.getLogger(__name__)


def _enable_case_sensitive_like(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


@dataclass
class BoundDatabase:
    """Engine and session factory owned by one Flask app."""

    engine: AsyncEngine
    Session: async_sessionmaker[AsyncSession]

    async def create_all(self) -> None:
        # register models on the metadata
        from .models import tutorial  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True


class Database:
    extension_key = "database"

    def init_app(self, app: Flask) -> BoundDatabase:
        url: str = app.config["DATABASE_URL"]
        echo: bool = app.config.get("SQL_ECHO", False)

        # Flask runs each async view on its own event loop, so connections
        # must not outlive the request that opened them.
        engine = create_async_engine(url, echo=echo, poolclass=NullPool)
        if make_url(url).get_backend_name() == "sqlite" and app.config.get("TITLE_MATCH_CASE_SENSITIVE", True):
            event.listen(engine.sync_engine, "connect", _enable_case_sensitive_like)

        bound = BoundDatabase(
            engine=engine,
            Session=async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False),
        )
        app.extensions[self.extension_key] = bound
        logger.debug("Database engine configured for %s", make_url(url).render_as_string(hide_password=True))
        return bound

    def get(self, app: Flask | None = None) -> BoundDatabase:
        app = app or current_app
        bound = app.extensions.get(self.extension_key)
        if bound is None:
            raise RuntimeError("Database is not initialized for this app")
        return bound


db = Database()
