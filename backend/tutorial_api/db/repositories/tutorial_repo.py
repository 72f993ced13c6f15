"""SQLAlchemy-backed Tutorial repository returning dataclasses."""
from __future__ import annotations

from typing import AsyncIterator, Optional

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.tutorial import TutorialModel
from ...domain.tutorial import Tutorial


def _to_dc(m: TutorialModel) -> Tutorial:
    return Tutorial(
        id=m.id,
        title=m.title,
        description=m.description,
        published=bool(m.published),
    )


class TutorialRepository:
    def __init__(self, session: AsyncSession, *, case_sensitive: bool = True) -> None:
        self.session = session
        self.case_sensitive = case_sensitive

    async def _iter(self, stmt: Select) -> AsyncIterator[Tutorial]:
        result = await self.session.scalars(stmt.order_by(TutorialModel.id))
        for m in result:
            yield _to_dc(m)

    def find_all(self) -> AsyncIterator[Tutorial]:
        return self._iter(select(TutorialModel))

    async def find_by_id(self, tutorial_id: int) -> Optional[Tutorial]:
        m = await self.session.get(TutorialModel, tutorial_id)
        return _to_dc(m) if m else None

    def find_by_title_containing(self, text: str) -> AsyncIterator[Tutorial]:
        if self.case_sensitive:
            cond = TutorialModel.title.contains(text, autoescape=True)
        else:
            cond = TutorialModel.title.icontains(text, autoescape=True)
        return self._iter(select(TutorialModel).where(cond))

    def find_by_published(self, published: bool) -> AsyncIterator[Tutorial]:
        return self._iter(select(TutorialModel).where(TutorialModel.published == published))

    async def save(self, data: Tutorial) -> Tutorial:
        m = TutorialModel(
            title=data.title,
            description=data.description,
            published=data.published,
        )
        if data.is_new:
            self.session.add(m)
        else:
            m.id = data.id
            m = await self.session.merge(m)
        await self.session.commit()
        await self.session.refresh(m)
        return _to_dc(m)

    async def delete_by_id(self, tutorial_id: int) -> None:
        await self.session.execute(delete(TutorialModel).where(TutorialModel.id == tutorial_id))
        await self.session.commit()

    async def delete_all(self) -> None:
        await self.session.execute(delete(TutorialModel))
        await self.session.commit()
