from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.responses import error_response
from .container import Container, build_container
from .core.logging import configure_logging, get_logger
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(_):
        return error_response("Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_):
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def server_error(e):
        logger.error("Unhandled server error: %s", e)
        return error_response("Server error", 500)


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass ``container`` to run against prebuilt services (tests); otherwise the
    MySQL-backed container is built from the active settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    app.extensions["hr_attendance"] = container

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return {"success": True, "status": "healthy"}

    register_employees(app, container)
    register_attendance(app, container)
    _register_error_handlers(app)

    return app
