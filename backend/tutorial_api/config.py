"""Application configuration objects."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class BaseConfig:
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///tutorials.db")
    SQL_ECHO: bool = _flag("SQL_ECHO", "false")
    CREATE_TABLES: bool = _flag("CREATE_TABLES", "false")

    # Repository backend
    TUTORIAL_REPO_BACKEND: str = os.getenv("TUTORIAL_REPO_BACKEND", "sqlalchemy")
    TITLE_MATCH_CASE_SENSITIVE: bool = _flag("TITLE_MATCH_CASE_SENSITIVE", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS, comma separated
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
