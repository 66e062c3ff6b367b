from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import json_error
from .container import BACKEND_MYSQL, Container, build_container
from .core.exceptions import AuthenticationError, NotFoundError, StoreUnavailableError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .diary.controller import register as register_diary
from .feedback.controller import register as register_feedback
from .history.controller import register as register_history
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return json_error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e: AuthenticationError):
        return json_error(str(e), 401)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return json_error(str(e), 404)

    @app.errorhandler(StoreUnavailableError)
    def _store_down(e: StoreUnavailableError):
        logger.error("Record store unavailable: %s", e)
        return json_error("Service temporarily unavailable", 503)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    backend = str(getattr(settings, "STORE_BACKEND", BACKEND_MYSQL)).lower()

    if app.config["DEBUG"]:
        print(
            "[center-admin] settings=", settings_module,
            " backend=", backend,
            " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        )

    if container is None:
        if backend == BACKEND_MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            if app.config["DEBUG"]:
                print(f"[center-admin] schema ready (tables={len(list_tables(db_config))})")
        container = build_container(db_config=db_config, backend=backend)

    app.extensions["center_admin"] = container

    _register_error_handlers(app)
    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_diary(app, container)
    register_feedback(app, container)
    register_reports(app, container)
    register_history(app, container)

    return app
