"""Health check endpoints."""
from __future__ import annotations

import logging

from flask import Blueprint
from sqlalchemy.exc import SQLAlchemyError

from ...db.session import db
from ...errors import ok

logger = logging.getLogger(__name__)

bp = Blueprint("health", __name__)


@bp.get("/")
def alive():
    return ok({"status": "ok"})


@bp.get("/db")
async def database_status():
    try:
        await db.get().ping()
    except SQLAlchemyError as exc:
        logger.warning("Database ping failed: %s", exc)
        return ok({"status": "unavailable"}, 503)
    return ok({"status": "ok"})
