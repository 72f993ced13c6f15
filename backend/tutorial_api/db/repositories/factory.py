"""Repository factory for Tutorial (sqlalchemy|memory)."""
from __future__ import annotations

from typing import Optional

from flask import current_app
from sqlalchemy.ext.asyncio import AsyncSession

from .base import TutorialRepositoryProtocol
from .tutorial_repo import TutorialRepository as SQLARepo
from .tutorial_repo_memory import TutorialRepositoryMemory


def tutorial_repo(session: Optional[AsyncSession] = None) -> TutorialRepositoryProtocol:
    backend = (current_app.config.get("TUTORIAL_REPO_BACKEND") or "sqlalchemy").lower()
    case_sensitive = bool(current_app.config.get("TITLE_MATCH_CASE_SENSITIVE", True))
    if backend == "memory":
        # one store per app so data survives across requests
        repo = current_app.extensions.get("tutorial_memory_repo")
        if repo is None:
            repo = TutorialRepositoryMemory(case_sensitive=case_sensitive)
            current_app.extensions["tutorial_memory_repo"] = repo
        return repo
    if backend != "sqlalchemy":
        raise RuntimeError(f"Unknown TUTORIAL_REPO_BACKEND: {backend!r}")
    if session is None:
        raise RuntimeError("SQLAlchemy repo requires a session")
    return SQLARepo(session, case_sensitive=case_sensitive)
