"""Pydantic request/response schemas for Tutorials API."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.tutorial import Tutorial


class TutorialIn(BaseModel):
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=255)
    published: bool = False

    def to_domain(self) -> Tutorial:
        return Tutorial(
            title=self.title,
            description=self.description,
            published=self.published,
        )


class TutorialOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: Optional[str]
    description: Optional[str]
    published: bool
