"""In-memory Tutorial repository for local development and tests."""
from __future__ import annotations

import threading
from dataclasses import replace
from typing import AsyncIterator, Callable, Dict, List, Optional

from ...domain.tutorial import Tutorial


class TutorialRepositoryMemory:
    def __init__(self, *, case_sensitive: bool = True) -> None:
        self.case_sensitive = case_sensitive
        self._rows: Dict[int, Tutorial] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def _snapshot(self, pred: Callable[[Tutorial], bool]) -> List[Tutorial]:
        with self._lock:
            return [replace(t) for _, t in sorted(self._rows.items()) if pred(t)]

    async def _iter(self, pred: Callable[[Tutorial], bool]) -> AsyncIterator[Tutorial]:
        for t in self._snapshot(pred):
            yield t

    def find_all(self) -> AsyncIterator[Tutorial]:
        return self._iter(lambda t: True)

    async def find_by_id(self, tutorial_id: int) -> Optional[Tutorial]:
        with self._lock:
            t = self._rows.get(tutorial_id)
            return replace(t) if t else None

    def find_by_title_containing(self, text: str) -> AsyncIterator[Tutorial]:
        if self.case_sensitive:
            return self._iter(lambda t: t.title is not None and text in t.title)
        needle = text.casefold()
        return self._iter(lambda t: t.title is not None and needle in t.title.casefold())

    def find_by_published(self, published: bool) -> AsyncIterator[Tutorial]:
        return self._iter(lambda t: t.published == published)

    async def save(self, data: Tutorial) -> Tutorial:
        with self._lock:
            if data.is_new:
                stored = replace(data, id=self._next_id)
            else:
                stored = replace(data)
            self._rows[stored.id] = stored
            self._next_id = max(self._next_id, stored.id + 1)
            return replace(stored)

    async def delete_by_id(self, tutorial_id: int) -> None:
        with self._lock:
            self._rows.pop(tutorial_id, None)

    async def delete_all(self) -> None:
        with self._lock:
            self._rows.clear()
