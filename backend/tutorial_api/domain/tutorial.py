"""Domain dataclass for Tutorial entities (DB-agnostic)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Tutorial:
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    published: bool = False

    @property
    def is_new(self) -> bool:
        # ids are assigned by the store; 0 counts as unassigned
        return not self.id
