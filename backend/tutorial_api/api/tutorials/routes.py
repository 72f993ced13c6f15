"""Tutorials blueprint (CRUD)."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from flask import Blueprint, abort, request

from ...db.repositories.factory import tutorial_repo
from ...db.session import db
from ...domain.tutorial import Tutorial
from ...errors import no_content, ok
from ...services.tutorial_service import TutorialService
from .schemas import TutorialIn, TutorialOut

logger = logging.getLogger(__name__)

bp = Blueprint("tutorials", __name__)

_TRUE = {"1", "true", "yes"}
_FALSE = {"0", "false", "no"}


@asynccontextmanager
async def _service() -> AsyncIterator[TutorialService]:
    async with db.get().Session() as session:
        yield TutorialService(tutorial_repo(session))


def _out(t: Tutorial) -> dict:
    return TutorialOut.model_validate(t).model_dump()


async def _collect(items: AsyncIterator[Tutorial]) -> List[dict]:
    return [_out(t) async for t in items]


def _parse_flag(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    abort(400, description=f"flag must be one of true/false, got {raw!r}")


@bp.get("/")
async def list_tutorials():
    title = request.args.get("title")
    async with _service() as svc:
        if title:
            items = await _collect(svc.find_by_title_containing(title))
        else:
            items = await _collect(svc.find_all())
    return ok(items)


@bp.get("/published")
async def list_published():
    flag = _parse_flag(request.args.get("flag", "true"))
    async with _service() as svc:
        items = await _collect(svc.find_by_published(flag))
    return ok(items)


@bp.get("/<int:tutorial_id>")
async def get_tutorial(tutorial_id: int):
    async with _service() as svc:
        t = await svc.find_by_id(tutorial_id)
    if not t:
        return ok(None, 404)
    return ok(_out(t))


@bp.post("/")
async def create_tutorial():
    payload = TutorialIn.model_validate_json(request.data)
    async with _service() as svc:
        created = await svc.save(payload.to_domain())
    logger.info("Created tutorial %s", created.id)
    return ok(_out(created), 201)


@bp.put("/<int:tutorial_id>")
async def update_tutorial(tutorial_id: int):
    payload = TutorialIn.model_validate_json(request.data)
    async with _service() as svc:
        t = await svc.update(tutorial_id, payload.to_domain())
    if not t:
        return ok(None, 404)
    logger.info("Updated tutorial %s", tutorial_id)
    return ok(_out(t))


@bp.delete("/<int:tutorial_id>")
async def delete_tutorial(tutorial_id: int):
    async with _service() as svc:
        await svc.delete_by_id(tutorial_id)
    logger.info("Deleted tutorial %s", tutorial_id)
    return no_content()


@bp.delete("/")
async def delete_all_tutorials():
    async with _service() as svc:
        await svc.delete_all()
    logger.info("Deleted all tutorials")
    return no_content()
