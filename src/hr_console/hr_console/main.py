from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from config import get_settings_module

from .common.web import NAV_ITEMS, current_role, current_user
from .container import Container, build_container
from .core.constants import DEFAULT_QUERY_CACHE_TTL, DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .store.service import can_write

from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .jobs.controller import register as register_jobs
from .kpi.controller import register as register_kpi
from .organization.controller import register as register_organization
from .performance.controller import register as register_performance
from .training.controller import register as register_training
from .users.controller import register as register_users

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    """Application factory.

    `container` lets tests run the views against in-memory repositories; when
    omitted one is built over MySQL from the settings' DB_CONFIG.
    """
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

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
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("Demo seed ready")

        container = build_container(
            db_config=db_config,
            cache_ttl=float(getattr(settings, "QUERY_CACHE_TTL", DEFAULT_QUERY_CACHE_TTL)),
        )

    @app.context_processor
    def inject_user():
        return {
            "current_user": current_user(),
            "can_write": can_write(current_role()),
            "nav_items": NAV_ITEMS,
        }

    @app.errorhandler(404)
    def not_found(_e):
        return render_template("404.html"), 404

    register_users(app, container)
    register_dashboard(app, container)
    register_organization(app, container)
    register_employees(app, container)
    register_jobs(app, container)
    register_training(app, container)
    register_performance(app, container)
    register_kpi(app, container)

    return app
