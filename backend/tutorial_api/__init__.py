"""Application factory and blueprint registration."""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Awaitable, Callable

import click
from flask import Flask
from flask_cors import CORS

from .config import BaseConfig
from .db.session import db
from .api.health.routes import bp as health_bp
from .api.tutorials.routes import bp as tutorials_bp
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_blocking(fn: Callable[[], Awaitable[Any]]) -> Any:
    """Run ``fn()`` to completion from synchronous code.

    When the caller already sits inside a running event loop (async tests,
    ASGI wrappers) the coroutine runs on a fresh loop in a worker thread.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(fn())
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(lambda: asyncio.run(fn())).result()


def create_app(config_class: type[BaseConfig] | BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    ``config_class`` may be a config class or an already built instance;
    tests pass instances to override single fields.
    """
    config = config_class() if isinstance(config_class, type) else (config_class or BaseConfig())

    app = Flask(__name__)
    app.config.from_object(config)
    setup_logging(app.config["LOG_LEVEL"])

    origins = [o.strip() for o in app.config["CORS_ORIGINS"].split(",") if o.strip()]
    CORS(app, resources={r"/api/*": {"origins": origins}})

    # Init extensions
    database = db.init_app(app)

    # Register blueprints
    app.register_blueprint(health_bp, url_prefix="/api/health")
    app.register_blueprint(tutorials_bp, url_prefix="/api/tutorials")
    app.register_blueprint(docs_bp)

    # Global error handlers
    register_error_handlers(app)

    @app.cli.command("init-db")
    def init_db_command() -> None:
        """Create all tables."""
        run_blocking(database.create_all)
        click.echo("Tables created.")

    if app.config.get("CREATE_TABLES") and app.config["TUTORIAL_REPO_BACKEND"].lower() == "sqlalchemy":
        run_blocking(database.create_all)
        logger.info("Database schema ensured")

    return app
