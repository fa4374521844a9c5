"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask

from .error_handlers import register_error_handlers
from .extensions import db, login_manager
from .identity import register_identity
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure package logging.

    ``app.logger`` is named after the import name, so it is the same
    ``wordchain_app`` logger that ``setup_logging`` configures.
    """

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=bool(app.config.get("LOG_JSON", False)),
        log_to_file=bool(app.config.get("LOG_TO_FILE", True)),
    )
    if app.debug:
        app.logger.setLevel(logging.DEBUG)
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    register_identity(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def register_errors(app: Flask) -> None:
    """Attach the JSON error handlers."""

    register_error_handlers(app)


def initialize_database(app: Flask) -> None:
    """Create database tables for the SQL-backed vocabulary store."""

    # Import models so their tables are known to the metadata
    from ..modules.vocabulary import models  # noqa: F401

    db.create_all()
    app.logger.info(
        "Database ready (vocabulary backend: %s).",
        app.config.get("VOCAB_STORAGE_BACKEND", "sqlalchemy"),
    )
