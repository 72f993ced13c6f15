"""Tutorial ORM model."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base


class TutorialModel(Base):
    __tablename__ = "tutorials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    description: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    published: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)
