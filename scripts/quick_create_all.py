"""Create all tables for a quick dev setup (NOT for production)."""
from __future__ import annotations

from tutorial_api import create_app, run_blocking
from tutorial_api.db.session import db


def main() -> None:
    app = create_app()
    run_blocking(db.get(app).create_all)
    print("Tables created.")


if __name__ == "__main__":
    main()
