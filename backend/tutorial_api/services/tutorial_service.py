"""Tutorial service encapsulating business rules."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import AsyncIterator, Optional

from ..db.repositories.base import TutorialRepositoryProtocol
from ..domain.tutorial import Tutorial

logger = logging.getLogger(__name__)

UPDATE_PREFIX = "Update "


def merge_title(current: Optional[str], incoming: Optional[str]) -> Optional[str]:
    """Title to store when ``incoming`` is applied over ``current``.

    ``None`` keeps the stored title; otherwise the incoming title gets the
    update prefix unless it already carries it.
    """
    if incoming is None:
        return current
    if incoming.startswith(UPDATE_PREFIX):
        return incoming
    return UPDATE_PREFIX + incoming


class TutorialService:
    def __init__(self, repo: TutorialRepositoryProtocol) -> None:
        self.repo = repo

    def find_all(self) -> AsyncIterator[Tutorial]:
        return self.repo.find_all()

    def find_by_title_containing(self, text: str) -> AsyncIterator[Tutorial]:
        return self.repo.find_by_title_containing(text)

    def find_by_published(self, published: bool) -> AsyncIterator[Tutorial]:
        return self.repo.find_by_published(published)

    async def find_by_id(self, tutorial_id: int) -> Optional[Tutorial]:
        return await self.repo.find_by_id(tutorial_id)

    async def save(self, tutorial: Tutorial) -> Tutorial:
        return await self.repo.save(tutorial)

    async def update(self, tutorial_id: int, data: Tutorial) -> Optional[Tutorial]:
        existing = await self.repo.find_by_id(tutorial_id)
        if existing is None:
            logger.debug("Tutorial %s not found, nothing to update", tutorial_id)
            return None
        merged = replace(
            existing,
            id=tutorial_id,
            title=merge_title(existing.title, data.title),
            description=data.description,
            published=data.published,
        )
        logger.debug("Updating tutorial %s: title %r -> %r", tutorial_id, existing.title, merged.title)
        return await self.repo.save(merged)

    async def delete_by_id(self, tutorial_id: int) -> None:
        await self.repo.delete_by_id(tutorial_id)

    async def delete_all(self) -> None:
        await self.repo.delete_all()
