"""Repository contract consumed by the Tutorial service."""
from __future__ import annotations

from typing import AsyncIterator, Optional, Protocol

from ...domain.tutorial import Tutorial


class TutorialRepositoryProtocol(Protocol):
    """Async access to persisted tutorials.

    Lookups of a single record resolve to ``None`` when nothing matches;
    multi-record lookups are async iterators that do no work until iterated.
    """

    def find_all(self) -> AsyncIterator[Tutorial]: ...

    async def find_by_id(self, tutorial_id: int) -> Optional[Tutorial]: ...

    def find_by_title_containing(self, text: str) -> AsyncIterator[Tutorial]: ...

    def find_by_published(self, published: bool) -> AsyncIterator[Tutorial]: ...

    async def save(self, tutorial: Tutorial) -> Tutorial: ...

    async def delete_by_id(self, tutorial_id: int) -> None: ...

    async def delete_all(self) -> None: ...
