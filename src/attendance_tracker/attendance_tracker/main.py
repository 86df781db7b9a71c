from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import failure
from .container import Container, PolicySettings, build_container
from .database.bootstrap import apply_schema, ensure_demo_data, list_tables
from .employees.controller import register as register_employees
from .offices.controller import register as register_offices
from .wfh.controller import register as register_wfh

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    origins = _cors_origins(getattr(settings, "CORS_ORIGINS", "*"))
    # Session cookies only travel to an explicit origin list.
    CORS(app, origins=origins, supports_credentials=origins != "*")

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
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_data(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config, settings=PolicySettings.from_module(settings))

    register_employees(app, container)
    register_offices(app, container)
    register_attendance(app, container)
    register_wfh(app, container)

    @app.errorhandler(404)
    def not_found(_error):
        return failure("Endpoint not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return failure("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(_error):
        return failure("Internal server error", 500)

    return app


def _cors_origins(raw) -> Union[str, list[str]]:
    if isinstance(raw, (list, tuple)):
        origins = [str(o).strip() for o in raw if str(o).strip()]
    else:
        origins = [o.strip() for o in str(raw or "").split(",") if o.strip()]
    if not origins or "*" in origins:
        return "*"
    return origins
