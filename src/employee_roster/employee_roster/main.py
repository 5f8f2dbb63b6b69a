from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, render_template
from sqlalchemy.exc import SQLAlchemyError

from config import get_settings_module

from .container import build_container
from .database.bootstrap import describe_target, init_schema
from .database.extensions import db
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.from_object(settings)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    database_uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    if not database_uri:
        raise RuntimeError("SQLALCHEMY_DATABASE_URI is not configured (set DATABASE_URL or DB_* variables)")

    logger.debug("settings=%s db=%s", settings_module, describe_target(database_uri))

    db.init_app(app)

    if app.config.get("AUTO_INIT_DB"):
        with app.app_context():
            init_schema()

    container = build_container(database=db)

    register_employees(app, container)
    register_error_handlers(app)

    return app


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(SQLAlchemyError)
    def storage_error(e):
        logger.exception("Storage error while handling request")
        db.session.rollback()
        return render_template("500.html"), 500
