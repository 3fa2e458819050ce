from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging import get_logger, setup_logging
from .container import build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .timeentries.controller import register as register_time_entries

ROOT_DIR = Path(__file__).resolve().parents[3]


def create_app(container=None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    log = get_logger(__name__)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        log.info(
            "app_starting",
            settings=settings_module,
            db=f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=ROOT_DIR / "database" / "schema.sql")
            log.info("schema_ready", tables=len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=ROOT_DIR / "database" / "seed.sql")
            log.info("demo_seed_ready")

        container = build_container(db_config=db_config)

    register_time_entries(app, container)
    return app
